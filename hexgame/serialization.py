"""
JSON serialization of full game state.

Stored format (versionless, field names are stable):

    {
        "size": 3,
        "currentPlayer": 1,
        "winner": null,
        "cells": [[0, 1, 0], [2, 0, 0], [0, 0, 0]]
    }

Cell tokens are 0 (empty), 1 (Black) and 2 (White); player tokens are 1
and 2. On a finished game currentPlayer equals winner. Connectivity is not
stored: loading replays every stone into a fresh Board.

Loading validates strictly and raises InvalidState for anything legal play
could not have produced: wrong shapes or tokens, stone counts that do not
fit alternating play from Black, a winner that is not connected (or a
connected player with no winner), both players connected, or a winner with
no stone whose removal breaks the connection.
"""

import json
import logging
from collections import deque
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from hexgame.board import Board, neighbor_table
from hexgame.config import (
    CELLS_FIELD, CURRENT_PLAYER_FIELD, MIN_BOARD_SIZE, SIZE_FIELD, WINNER_FIELD
)
from hexgame.enums import CellState, Color, color_to_cell_state, int_to_cell_state, int_to_color
from hexgame.errors import InvalidState
from hexgame.game import Game

logger = logging.getLogger(__name__)


def _invalid(message: str) -> InvalidState:
    logger.debug(f"Rejecting stored game: {message}")
    return InvalidState(message)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# --- Saving ---

def save_to_json(game: Game) -> Dict[str, Any]:
    """Convert a game to a JSON-compatible dict."""
    return {
        SIZE_FIELD: game.size,
        CURRENT_PLAYER_FIELD: game.current_player.value,
        WINNER_FIELD: game.winner.value if game.winner is not None else None,
        CELLS_FIELD: [[int(v) for v in row] for row in game.board.cells.tolist()],
    }


def save_to_string(game: Game, indent: Optional[int] = None) -> str:
    """Serialize a game to a JSON string."""
    return json.dumps(save_to_json(game), indent=indent)


def save_to_file(game: Game, path: Union[str, Path]) -> None:
    """Write a game to a JSON file."""
    Path(path).write_text(save_to_string(game, indent=2) + "\n", encoding="utf-8")


# --- Loading ---

def _read_player(data: Mapping[str, Any], field: str, optional: bool) -> Optional[Color]:
    if field not in data:
        if optional:
            return None
        raise _invalid(f"Missing field '{field}'")
    value = data[field]
    if value is None and optional:
        return None
    if not _is_int(value):
        raise _invalid(f"Field '{field}' must be 1 or 2, got {value!r}")
    try:
        return int_to_color(value)
    except ValueError as e:
        raise _invalid(f"Field '{field}': {e}") from e


def _read_cells(data: Mapping[str, Any], size: int) -> List[List[CellState]]:
    if CELLS_FIELD not in data:
        raise _invalid(f"Missing field '{CELLS_FIELD}'")
    rows = data[CELLS_FIELD]
    if not isinstance(rows, list) or len(rows) != size:
        raise _invalid(f"Field '{CELLS_FIELD}' must be a list of {size} rows")
    cells = []
    for r, row in enumerate(rows):
        if not isinstance(row, list) or len(row) != size:
            raise _invalid(f"Row {r} must be a list of {size} cell tokens")
        parsed = []
        for c, token in enumerate(row):
            if not _is_int(token):
                raise _invalid(f"Cell ({r}, {c}) must be 0, 1 or 2, got {token!r}")
            try:
                parsed.append(int_to_cell_state(token))
            except ValueError as e:
                raise _invalid(f"Cell ({r}, {c}): {e}") from e
        cells.append(parsed)
    return cells


def _connects_without(board: Board, color: Color, skipped: int) -> bool:
    """Brute-force reachability check for color with one cell treated as empty."""
    size = board.size
    flat = board.cells.reshape(-1)
    value = color_to_cell_state(color).value

    def on_line(index: int, line: int) -> bool:
        row, column = divmod(index, size)
        return (row if color is Color.BLACK else column) == line

    frontier = deque(
        i for i in range(size * size)
        if i != skipped and flat[i] == value and on_line(i, 0)
    )
    seen = set(frontier)
    table = neighbor_table(size)
    while frontier:
        index = frontier.popleft()
        if on_line(index, size - 1):
            return True
        for neighbor in table[index]:
            if neighbor != skipped and neighbor not in seen and flat[neighbor] == value:
                seen.add(neighbor)
                frontier.append(neighbor)
    return False


def _validate_position(board: Board, current_player: Color, winner: Optional[Color]) -> None:
    black, white = board.count_stones()
    black_connected = board.is_connected(Color.BLACK)
    white_connected = board.is_connected(Color.WHITE)

    if black_connected and white_connected:
        raise _invalid("Both players are connected")

    if winner is None:
        if black_connected or white_connected:
            raise _invalid("A player is connected but no winner is recorded")
        expected_player = Color.BLACK if black == white else Color.WHITE
        if black not in (white, white + 1):
            raise _invalid(f"Stone counts Black={black}, White={white} are impossible with alternating play")
        if current_player is not expected_player:
            raise _invalid(f"With Black={black}, White={white} it must be {expected_player}'s turn")
        return

    if current_player is not winner:
        raise _invalid("currentPlayer must equal winner on a finished game")
    if not board.is_connected(winner):
        raise _invalid(f"{winner} is recorded as winner but is not connected")
    expected_black = white + 1 if winner is Color.BLACK else white
    if black != expected_black:
        raise _invalid(f"Stone counts Black={black}, White={white} do not fit a {winner} win")

    size = board.size
    flat = board.cells.reshape(-1)
    value = color_to_cell_state(winner).value
    if not any(
        flat[i] == value and not _connects_without(board, winner, i)
        for i in range(size * size)
    ):
        raise _invalid(f"{winner} was already connected before its last move")


def load_from_json(data: Any) -> Game:
    """
    Reconstruct a game from the dict produced by save_to_json.

    The 'winner' field may be omitted (treated as null); unknown fields are
    ignored.

    Raises:
        InvalidState: If the data is malformed or describes a position that
            legal play cannot reach
    """
    if not isinstance(data, Mapping):
        raise _invalid(f"Stored game must be an object, got {type(data).__name__}")
    if SIZE_FIELD not in data:
        raise _invalid(f"Missing field '{SIZE_FIELD}'")
    size = data[SIZE_FIELD]
    if not _is_int(size) or size < MIN_BOARD_SIZE:
        raise _invalid(f"Field '{SIZE_FIELD}' must be an integer >= {MIN_BOARD_SIZE}, got {size!r}")

    cells = _read_cells(data, size)
    current_player = _read_player(data, CURRENT_PLAYER_FIELD, optional=False)
    winner = _read_player(data, WINNER_FIELD, optional=True)

    board = Board.from_cells(cells)
    _validate_position(board, current_player, winner)
    return Game._from_parts(board, current_player, winner)


def load_from_string(text: str) -> Game:
    """Parse a JSON string and reconstruct the game. Raises InvalidState."""
    try:
        data = json.loads(text)
    except RecursionError as e:
        raise _invalid("JSON nesting is too deep") from e
    except (TypeError, ValueError) as e:
        raise _invalid(f"Not valid JSON: {e}") from e
    return load_from_json(data)


def load_from_file(path: Union[str, Path]) -> Game:
    """Read a game from a JSON file. Raises InvalidState for bad contents."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise _invalid(f"{path} is not UTF-8 text: {e}") from e
    return load_from_string(text)
