"""
hexgame: rules engine and state representation for the board game Hex.

Built to sit inside search loops: incremental win detection through
per-color Union-Find, neighbor and empty-cell queries, bridge detection,
and a stable JSON format for saving games.
"""

# Version info
__version__ = "2025.1.0"

from hexgame.board import Board
from hexgame.bridges import AttackedBridge, Bridge, find_attacked_bridges, find_bridges
from hexgame.coords import Coords
from hexgame.enums import CellState, Color, Edge, GameStatus
from hexgame.errors import CellOccupied, GameOver, HexError, InvalidCoordinate, InvalidState, OutOfBounds
from hexgame.game import Game
from hexgame.serialization import load_from_json, load_from_string, save_to_json, save_to_string

__all__ = [
    "AttackedBridge",
    "Board",
    "Bridge",
    "CellOccupied",
    "CellState",
    "Color",
    "Coords",
    "Edge",
    "Game",
    "GameOver",
    "GameStatus",
    "HexError",
    "InvalidCoordinate",
    "InvalidState",
    "OutOfBounds",
    "find_attacked_bridges",
    "find_bridges",
    "load_from_json",
    "load_from_string",
    "save_to_json",
    "save_to_string",
]
