"""
Turn-taking game state for Hex.

A Game owns exactly one Board, the player to move and the winner once the
game has finished. It is the only code that places stones during play.
Black moves first; there is no swap rule.
"""

import logging
from typing import List, Optional, Union

from hexgame.board import Board
from hexgame.config import DEFAULT_BOARD_SIZE
from hexgame.coords import Coords
from hexgame.enums import Color, GameStatus
from hexgame.errors import GameOver

logger = logging.getLogger(__name__)


class Game:
    """
    Hex game state machine.

    States are IN_PROGRESS (with a player to move) and FINISHED (with a
    winner). play() is all-or-nothing: when it raises, the board and the
    player to move are unchanged. Once finished, the game rejects moves.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        self._board = Board(size)
        self._current_player = Color.BLACK
        self._winner: Optional[Color] = None

    @classmethod
    def _from_parts(cls, board: Board, current_player: Color, winner: Optional[Color]) -> "Game":
        """Assemble a game from already validated parts (used by the loaders)."""
        game = cls.__new__(cls)
        game._board = board
        game._current_player = current_player
        game._winner = winner
        return game

    @property
    def board(self) -> Board:
        """The game's board. Query it freely; mutate it only through play()."""
        return self._board

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def current_player(self) -> Color:
        """Player to move; on a finished game, the player who made the last move."""
        return self._current_player

    @property
    def winner(self) -> Optional[Color]:
        return self._winner

    @property
    def status(self) -> GameStatus:
        return GameStatus.IN_PROGRESS if self._winner is None else GameStatus.FINISHED

    @property
    def game_over(self) -> bool:
        return self._winner is not None

    def play(self, coords: Coords) -> None:
        """
        Place a stone for the current player.

        Args:
            coords: Cell to play

        Raises:
            GameOver: If the game has already finished
            OutOfBounds: If coords are not on the board
            CellOccupied: If the cell already holds a stone
        """
        if self._winner is not None:
            raise GameOver(self._winner)

        player = self._current_player
        self._board.place_stone(coords, player)

        if self._board.is_connected(player):
            self._winner = player
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"{player} connects its edges with {coords} and wins")
        else:
            self._current_player = player.opponent

    def play_notation(self, text: str) -> Coords:
        """
        Parse human notation (e.g. "d5") against this board and play it.

        Returns:
            The Coords that were played

        Raises:
            InvalidCoordinate: If the text cannot be parsed for this board
            GameOver, CellOccupied: As for play()
        """
        coords = Coords.parse(text, self.size)
        self.play(coords)
        return coords

    def make_move(self, coords: Union[Coords, str]) -> "Game":
        """
        Return a new game with the move applied, leaving this one unchanged.

        Accepts Coords or human notation.
        """
        child = self.copy()
        if isinstance(coords, str):
            child.play_notation(coords)
        else:
            child.play(coords)
        return child

    def legal_moves(self) -> List[Coords]:
        """Empty cells in row-major order, or [] once the game has finished."""
        if self._winner is not None:
            return []
        return list(self._board.get_empty_cells())

    def copy(self) -> "Game":
        """Independent deep copy, safe to hand to another search worker."""
        return Game._from_parts(self._board.copy(), self._current_player, self._winner)

    def __copy__(self) -> "Game":
        return self.copy()

    def __deepcopy__(self, memo) -> "Game":
        return self.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return (
            self._board == other._board
            and self._current_player is other._current_player
            and self._winner is other._winner
        )

    __hash__ = None

    def __str__(self) -> str:
        if self._winner is not None:
            status = f"Game over - {self._winner} wins!"
        else:
            status = f"{self._current_player} to play"
        return f"{status}\n{self._board}"

    def __repr__(self) -> str:
        return (f"Game(size={self.size}, current_player={self._current_player.name}, "
                f"winner={self._winner.name if self._winner is not None else None})")
