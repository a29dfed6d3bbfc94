"""
Hex board representation with incremental win detection.

The board is an N×N grid of cell states stored in a numpy array. Each color
owns an independent array-based Union-Find (DSU) over the cells plus two
virtual edge nodes, so checking for a win after a move is a single
connectivity query instead of a full-board traversal. This matters because
search code calls it after every simulated move.

Adjacency uses the six offsets (-1,0), (-1,+1), (0,-1), (0,+1), (+1,-1),
(+1,0) on (row, column). Black connects row 0 to row N-1, White connects
column 0 to column N-1.
"""

from functools import lru_cache
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from hexgame.config import MIN_BOARD_SIZE
from hexgame.coords import Coords
from hexgame.enums import CellState, Color, Edge, color_to_cell_state, get_edges_of_color
from hexgame.errors import CellOccupied, OutOfBounds
from hexgame.union_find import ArrayDSU

# Hex neighbor directions, in the order get_neighbors reports them
HEX_NEIGHBOR_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0)
)

_EMPTY = CellState.EMPTY.value


@lru_cache(maxsize=None)
def neighbor_table(size: int) -> Tuple[Tuple[int, ...], ...]:
    """
    Precomputed neighbor lookup table for a board size.

    Entry i lists the row-major indices of the in-bounds neighbors of cell i,
    in HEX_NEIGHBOR_DIRECTIONS order.
    """
    table = []
    for r in range(size):
        for c in range(size):
            table.append(tuple(
                (r + dr) * size + (c + dc)
                for dr, dc in HEX_NEIGHBOR_DIRECTIONS
                if 0 <= r + dr < size and 0 <= c + dc < size
            ))
    return tuple(table)


def _validate_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise TypeError(f"Board size must be an integer, got {type(size).__name__}")
    if size < MIN_BOARD_SIZE:
        raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}, got {size}")
    return int(size)


class Board:
    """
    Fixed-size Hex board owning one connectivity structure per color.

    Invariant: a cell is unioned into a color's DSU if and only if it holds a
    stone of that color. Stones are only ever added, never removed.
    """

    def __init__(self, size: int):
        self._size = _validate_size(size)
        self._cells = np.full((self._size, self._size), _EMPTY, dtype=np.int8)
        self._flat = self._cells.reshape(-1)
        dsu_size = self._size * self._size + 2  # +2 for edge nodes
        self._dsus = {
            Color.BLACK: ArrayDSU(dsu_size),
            Color.WHITE: ArrayDSU(dsu_size),
        }

    @property
    def size(self) -> int:
        return self._size

    @property
    def cells(self) -> np.ndarray:
        """Read-only N×N view of the cell values (CellState values)."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _index(self, coords: Coords) -> int:
        if not coords.is_on_board_with_size(self._size):
            raise OutOfBounds(coords, self._size)
        return coords.row * self._size + coords.column

    def _edge_index(self, first: bool) -> int:
        return self._size * self._size + (0 if first else 1)

    def is_on_board(self, coords: Coords) -> bool:
        return coords.is_on_board_with_size(self._size)

    def get_color(self, coords: Coords) -> CellState:
        """Get the state of a cell. Raises OutOfBounds for off-board coordinates."""
        return CellState(int(self._flat[self._index(coords)]))

    def is_empty(self, coords: Coords) -> bool:
        return self._flat[self._index(coords)] == _EMPTY

    def get_neighbors(self, coords: Coords) -> List[Coords]:
        """
        Get the in-bounds neighbors of a cell.

        Returns 2 (acute corners) to 6 (interior) coordinates on boards of
        size 2 or more, in HEX_NEIGHBOR_DIRECTIONS order.
        """
        index = self._index(coords)
        size = self._size
        return [Coords(*divmod(n, size)) for n in neighbor_table(size)[index]]

    def get_empty_cells(self) -> Iterator[Coords]:
        """
        Lazily yield every empty cell in row-major order.

        Each call starts a fresh pass over the current board; cells filled
        before the generator reaches them are skipped.
        """
        size = self._size
        flat = self._flat
        for index in range(size * size):
            if flat[index] == _EMPTY:
                yield Coords(*divmod(index, size))

    def edges_of(self, coords: Coords) -> List[Edge]:
        """Edges touched by a cell, in LEFT, TOP, RIGHT, BOTTOM order."""
        self._index(coords)
        last = self._size - 1
        edges = []
        if coords.column == 0:
            edges.append(Edge.LEFT)
        if coords.row == 0:
            edges.append(Edge.TOP)
        if coords.column == last:
            edges.append(Edge.RIGHT)
        if coords.row == last:
            edges.append(Edge.BOTTOM)
        return edges

    def count_stones(self) -> Tuple[int, int]:
        """Count stones on the board as (black_count, white_count)."""
        black = np.count_nonzero(self._cells == CellState.BLACK.value)
        white = np.count_nonzero(self._cells == CellState.WHITE.value)
        return int(black), int(white)

    def is_connected(self, color: Color) -> bool:
        """True iff color's two goal edges are joined by a chain of its stones."""
        return self._dsus[color].connected(self._edge_index(True), self._edge_index(False))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def place_stone(self, coords: Coords, color: Color) -> None:
        """
        Place a stone and merge it into its color's connectivity structure.

        Game is the only caller during play; Board.from_cells also uses it
        when rebuilding a stored position. Nothing changes if it raises.

        Raises:
            OutOfBounds: If coords are not on the board
            CellOccupied: If the cell already holds a stone
        """
        index = self._index(coords)
        if self._flat[index] != _EMPTY:
            raise CellOccupied(coords)

        value = color_to_cell_state(color).value
        self._flat[index] = value
        self._connect(index, coords, value, color)

    def _connect(self, index: int, coords: Coords, value: int, color: Color) -> None:
        """Union a newly placed stone with same-colored neighbors and its goal edges."""
        dsu = self._dsus[color]
        flat = self._flat
        for neighbor in neighbor_table(self._size)[index]:
            if flat[neighbor] == value:
                dsu.union(index, neighbor)

        last = self._size - 1
        line = coords.row if color is Color.BLACK else coords.column
        if line == 0:
            dsu.union(index, self._edge_index(True))
        if line == last:
            dsu.union(index, self._edge_index(False))

    # ------------------------------------------------------------------
    # Conversion and copying
    # ------------------------------------------------------------------

    def to_cells(self) -> List[List[CellState]]:
        """Export the grid as nested lists of CellState, row-major."""
        return [[CellState(int(v)) for v in row] for row in self._cells.tolist()]

    @classmethod
    def from_cells(cls, rows: Sequence[Sequence[CellState]]) -> "Board":
        """
        Build a board from a square matrix of CellState.

        Connectivity is re-derived by placing every stone.

        Raises:
            ValueError: If the matrix is empty or not square
            TypeError: If an entry is not a CellState
        """
        size = len(rows)
        board = cls(size)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Length of row {r} does not match board size {size}")
            for c, state in enumerate(row):
                if not isinstance(state, CellState):
                    raise TypeError(f"Cell ({r}, {c}) must be CellState, got {type(state).__name__}")
                if state is CellState.BLACK:
                    board.place_stone(Coords(r, c), Color.BLACK)
                elif state is CellState.WHITE:
                    board.place_stone(Coords(r, c), Color.WHITE)
        return board

    def copy(self) -> "Board":
        """Deep copy: the cell array and both DSUs are duplicated."""
        new_board = Board.__new__(Board)
        new_board._size = self._size
        new_board._cells = self._cells.copy()
        new_board._flat = new_board._cells.reshape(-1)
        new_board._dsus = {color: dsu.copy() for color, dsu in self._dsus.items()}
        return new_board

    def __copy__(self) -> "Board":
        return self.copy()

    def __deepcopy__(self, memo) -> "Board":
        return self.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._cells, other._cells)

    __hash__ = None

    def __str__(self) -> str:
        from hexgame.display import board_to_string
        return board_to_string(self)

    def __repr__(self) -> str:
        black, white = self.count_stones()
        return f"Board(size={self._size}, black={black}, white={white})"
