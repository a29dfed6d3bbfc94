"""
Centralized enum definitions for the Hex engine.

This module is the single source of truth for representing players, cell
contents, board edges and game status. Other modules should import these
Enums rather than duplicating constants.
"""

from enum import Enum
from typing import Optional, Tuple


class StrictEnum(Enum):
    """
    Enum whose members only compare against members of the same enum.

    Comparing a Color with a CellState (or with a bare int) is almost always
    a bug in board code, so it raises TypeError instead of returning False.
    """

    def __eq__(self, other):
        if type(other) is not type(self):
            raise TypeError(f"Cannot compare {type(self).__name__}.{self.name} with {other!r}")
        return self is other

    def __hash__(self):
        return hash((type(self).__name__, self.value))


class Color(StrictEnum):
    """Player colors. Black moves first and connects top to bottom."""
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    def __str__(self) -> str:
        return self.name.capitalize()


class CellState(StrictEnum):
    """Contents of a single board cell. Values double as serialized tokens."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2


class GameStatus(StrictEnum):
    IN_PROGRESS = 0
    FINISHED = 1


class Edge(Enum):
    """
    The four sides of the board.

    TOP and BOTTOM belong to Black, LEFT and RIGHT to White. Edge is a plain
    Enum so it can share containers with coordinates.
    """
    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"

    @property
    def color(self) -> Color:
        return Color.BLACK if self in (Edge.TOP, Edge.BOTTOM) else Color.WHITE


# ============================================================================
# Helper Functions for Enum Conversion
# ============================================================================

def color_to_cell_state(color: Color) -> CellState:
    """Convert a Color to the CellState of a stone of that color."""
    return CellState.BLACK if color is Color.BLACK else CellState.WHITE


def cell_state_to_color(state: CellState) -> Optional[Color]:
    """Convert a CellState to the Color of its stone, or None when empty."""
    if state is CellState.EMPTY:
        return None
    return Color.BLACK if state is CellState.BLACK else Color.WHITE


def get_edges_of_color(color: Color) -> Tuple[Edge, Edge]:
    """Return the (first, second) goal edges of a color."""
    if color is Color.BLACK:
        return Edge.TOP, Edge.BOTTOM
    return Edge.LEFT, Edge.RIGHT


def int_to_color(value: int) -> Color:
    """Convert a serialized token (1/2) to a Color."""
    if value not in (Color.BLACK.value, Color.WHITE.value):
        raise ValueError(f"Invalid color token: {value}")
    return Color(value)


def int_to_cell_state(value: int) -> CellState:
    """Convert a serialized token (0/1/2) to a CellState."""
    if value not in (CellState.EMPTY.value, CellState.BLACK.value, CellState.WHITE.value):
        raise ValueError(f"Invalid cell token: {value}")
    return CellState(value)
