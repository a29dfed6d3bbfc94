"""
Bridge detection for Hex.

A bridge is two same-colored stones X and Y with two empty "carrier" cells
that are both adjacent to X and to Y. If the opponent takes one carrier,
playing the other keeps X and Y connected. Search code uses this to prune
or bias its move choice: an attacked bridge almost always demands the
reply at the other carrier.

Geometry: walking the six neighbor directions in cyclic order
(-1,0), (-1,+1), (0,+1), (+1,0), (+1,-1), (0,-1), every two consecutive
directions d1, d2 give carriers X+d1 and X+d2 and partner Y = X+d1+d2.

Bridges to a player's own edge ("edge templates") are reported only when
include_edges=True; by default any off-board cell rules a bridge out.
"""

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple, Union

import numpy as np

from hexgame.board import Board
from hexgame.coords import Coords
from hexgame.enums import CellState, Color, Edge, cell_state_to_color, color_to_cell_state

# Neighbor directions in cyclic order around a cell
CYCLIC_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0), (-1, 1), (0, 1), (1, 0), (1, -1), (0, -1)
)

# (partner offset, carrier 1 offset, carrier 2 offset) for each of the six rotations
BRIDGE_PATTERNS: Tuple[Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]], ...] = tuple(
    (
        (d1[0] + d2[0], d1[1] + d2[1]),
        d1,
        d2,
    )
    for d1, d2 in zip(CYCLIC_DIRECTIONS, CYCLIC_DIRECTIONS[1:] + CYCLIC_DIRECTIONS[:1])
)

Endpoint = Union[Coords, Edge]


@dataclass(frozen=True)
class Bridge:
    """
    A bridge between stone_a and stone_b through two empty carriers.

    Canonical form: stone_a < stone_b when both are cells, stone_b is the
    Edge for edge templates, and carrier_1 < carrier_2.
    """
    stone_a: Coords
    stone_b: Endpoint
    carrier_1: Coords
    carrier_2: Coords

    @property
    def carriers(self) -> Tuple[Coords, Coords]:
        return self.carrier_1, self.carrier_2

    @property
    def is_edge_template(self) -> bool:
        return isinstance(self.stone_b, Edge)

    def other_carrier(self, carrier: Coords) -> Coords:
        if carrier == self.carrier_1:
            return self.carrier_2
        if carrier == self.carrier_2:
            return self.carrier_1
        raise ValueError(f"{carrier} is not a carrier of {self}")

    def __str__(self) -> str:
        stone_b = self.stone_b.value if self.is_edge_template else self.stone_b
        return f"{self.stone_a}-{stone_b} via {self.carrier_1}/{self.carrier_2}"


@dataclass(frozen=True)
class AttackedBridge:
    """A bridge with one carrier just taken; defend_at is the forced reply."""
    bridge: Bridge
    defend_at: Coords


def make_bridge(stone_a: Endpoint, stone_b: Endpoint, carrier_1: Coords, carrier_2: Coords) -> Bridge:
    """Build a Bridge in canonical form."""
    if isinstance(stone_a, Edge):
        stone_a, stone_b = stone_b, stone_a
    elif isinstance(stone_b, Coords) and stone_b < stone_a:
        stone_a, stone_b = stone_b, stone_a
    if carrier_2 < carrier_1:
        carrier_1, carrier_2 = carrier_2, carrier_1
    return Bridge(stone_a, stone_b, carrier_1, carrier_2)


def _edge_beyond(size: int, row: int, column: int) -> Optional[Edge]:
    """The edge an off-board position lies just past, or None past a corner."""
    row_inside = 0 <= row < size
    column_inside = 0 <= column < size
    if row_inside == column_inside:
        return None
    if not row_inside:
        return Edge.TOP if row < 0 else Edge.BOTTOM
    return Edge.LEFT if column < 0 else Edge.RIGHT


def find_bridges(board: Board, color: Color, include_edges: bool = False) -> Set[Bridge]:
    """
    Enumerate every intact bridge of a color.

    Args:
        board: Board to inspect (not modified)
        color: Color whose bridges to find
        include_edges: Also report bridges from a stone to its own edge

    Returns:
        Set of canonical Bridge records; each stone pair appears once
    """
    size = board.size
    cells = board.cells
    value = color_to_cell_state(color).value
    empty = CellState.EMPTY.value
    bridges: Set[Bridge] = set()

    for r, c in np.argwhere(cells == value).tolist():
        for (pr, pc), (ar, ac), (br, bc) in BRIDGE_PATTERNS:
            r1, c1, r2, c2 = r + ar, c + ac, r + br, c + bc
            if not (0 <= r1 < size and 0 <= c1 < size and 0 <= r2 < size and 0 <= c2 < size):
                continue
            if cells[r1, c1] != empty or cells[r2, c2] != empty:
                continue
            partner_r, partner_c = r + pr, c + pc
            if 0 <= partner_r < size and 0 <= partner_c < size:
                if cells[partner_r, partner_c] == value:
                    bridges.add(make_bridge(Coords(r, c), Coords(partner_r, partner_c),
                                            Coords(r1, c1), Coords(r2, c2)))
            elif include_edges:
                edge = _edge_beyond(size, partner_r, partner_c)
                if edge is not None and edge.color is color:
                    bridges.add(make_bridge(Coords(r, c), edge, Coords(r1, c1), Coords(r2, c2)))
    return bridges


def _ring_around(board: Board, center: Coords, include_edges: bool) -> List[Optional[Endpoint]]:
    """
    The six positions around a cell in cyclic order.

    Off-board positions become their Edge when include_edges is set (runs of
    the same edge collapse into one entry) and None otherwise.
    """
    size = board.size
    ring: List[Optional[Endpoint]] = []
    for dr, dc in CYCLIC_DIRECTIONS:
        row, column = center.row + dr, center.column + dc
        if 0 <= row < size and 0 <= column < size:
            ring.append(Coords(row, column))
        elif include_edges:
            ring.append(_edge_beyond(size, row, column))
        else:
            ring.append(None)

    if include_edges:
        collapsed: List[Optional[Endpoint]] = []
        for entry in ring:
            if not (collapsed and isinstance(entry, Edge) and collapsed[-1] is entry):
                collapsed.append(entry)
        while len(collapsed) > 1 and isinstance(collapsed[0], Edge) and collapsed[0] is collapsed[-1]:
            collapsed.pop()
        ring = collapsed
    return ring


def find_attacked_bridges(board: Board, last_move: Coords, include_edges: bool = False) -> List[AttackedBridge]:
    """
    Find the opponent bridges broken into by the most recent move.

    The stone at last_move belongs to the mover; every bridge of the other
    color that used last_move as a carrier and still has its other carrier
    empty is reported, with that other carrier as defend_at.

    Args:
        board: Board after last_move was played (not modified)
        last_move: Coordinates of the most recent stone
        include_edges: Also report attacked bridges to the defender's edge

    Returns:
        Attacked bridges in cyclic neighbor order around last_move; empty if
        last_move holds no stone or nothing was attacked

    Raises:
        OutOfBounds: If last_move is not on the board
    """
    mover = cell_state_to_color(board.get_color(last_move))
    if mover is None:
        return []
    defender = mover.opponent
    value = color_to_cell_state(defender).value
    empty = CellState.EMPTY.value
    cells = board.cells

    def owned_by_defender(entry: Optional[Endpoint]) -> bool:
        if isinstance(entry, Coords):
            return cells[entry.row, entry.column] == value
        return isinstance(entry, Edge) and entry.color is defender

    ring = _ring_around(board, last_move, include_edges)
    count = len(ring)
    if count < 3:
        return []

    result: List[AttackedBridge] = []
    for i in range(count):
        stone_a, carrier, stone_b = ring[i], ring[(i + 1) % count], ring[(i + 2) % count]
        if not isinstance(carrier, Coords) or cells[carrier.row, carrier.column] != empty:
            continue
        if not (owned_by_defender(stone_a) and owned_by_defender(stone_b)):
            continue
        if isinstance(stone_a, Edge) and isinstance(stone_b, Edge):
            continue
        attacked = AttackedBridge(make_bridge(stone_a, stone_b, last_move, carrier), carrier)
        if attacked not in result:
            result.append(attacked)
    return result
