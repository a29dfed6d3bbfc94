"""
Cell coordinates and the human "letter + number" notation.

Columns are written as letters using spreadsheet-style naming
(a..z, aa..az, ba.., ...), rows as 1-based numbers, so "d5" is
column 3, row 4. Letters are case-insensitive on input and always
lower case on output.
"""

import re
import string
from dataclasses import dataclass
from typing import Tuple

from hexgame.errors import InvalidCoordinate

LETTERS = string.ascii_lowercase

_NOTATION_RE = re.compile(r"([a-z]+)([0-9]+)")


def column_to_letters(column: int) -> str:
    """Convert a zero-based column index to its letter name (0 -> 'a', 26 -> 'aa')."""
    if column < 0:
        raise ValueError(f"Column index must be non-negative, got {column}")
    letters = ""
    n = column + 1
    while n > 0:
        n, remainder = divmod(n - 1, 26)
        letters = LETTERS[remainder] + letters
    return letters


def letters_to_column(letters: str) -> int:
    """Convert a lower-case letter name to its zero-based column index."""
    if not letters or any(ch not in LETTERS for ch in letters):
        raise ValueError(f"Invalid column letters: {letters!r}")
    n = 0
    for ch in letters:
        n = n * 26 + LETTERS.index(ch) + 1
    return n - 1


@dataclass(frozen=True, order=True)
class Coords:
    """
    Immutable (row, column) address of a cell, both zero-based.

    Construction is unchecked; validity against a board size is enforced
    where the coordinate is used.
    """
    row: int
    column: int

    def is_on_board_with_size(self, size: int) -> bool:
        return 0 <= self.row < size and 0 <= self.column < size

    def to_index(self, size: int) -> int:
        """Dense row-major index used by the connectivity arrays."""
        return self.row * size + self.column

    @classmethod
    def from_index(cls, index: int, size: int) -> "Coords":
        row, column = divmod(index, size)
        return cls(row, column)

    def offset(self, d_row: int, d_column: int) -> "Coords":
        return Coords(self.row + d_row, self.column + d_column)

    def as_tuple(self) -> Tuple[int, int]:
        return self.row, self.column

    def to_human_string(self) -> str:
        """Format as letter + 1-based row, e.g. Coords(4, 3) -> 'd5'."""
        return f"{column_to_letters(self.column)}{self.row + 1}"

    @classmethod
    def parse(cls, text: str, size: int) -> "Coords":
        """
        Parse human notation against a board size.

        Args:
            text: Coordinate text such as "a1", "D5" or "aa12"
            size: Board size the coordinate must fit

        Returns:
            The parsed Coords

        Raises:
            InvalidCoordinate: If the text does not match the notation or
                the indices fall outside [0, size)
        """
        if not isinstance(text, str):
            raise InvalidCoordinate(repr(text), "expected a string")
        match = _NOTATION_RE.fullmatch(text.strip().lower())
        if not match:
            raise InvalidCoordinate(text, "expected a column letter followed by a row number, e.g. 'a1'")
        letters, digits = match.groups()
        if digits.startswith("0"):
            raise InvalidCoordinate(text, "row numbers start at 1 and have no leading zeros")
        coords = cls(int(digits) - 1, letters_to_column(letters))
        if not coords.is_on_board_with_size(size):
            raise InvalidCoordinate(text, f"outside a {size}x{size} board")
        return coords

    def __str__(self) -> str:
        if self.row < 0 or self.column < 0:
            return f"({self.row}, {self.column})"
        return self.to_human_string()
