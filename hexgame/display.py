r"""
Human-readable board rendering.

Layout (size 5):

     a  b  c  d  e
    1\.  .  .  .  .\1
     2\.  ●  .  ○  .\2
      3\.  .  ●  .  .\3
       4\.  .  .  ○  .\4
        5\.  .  .  .  .\5
           a  b  c  d  e
"""

import sys
from typing import Optional, TextIO

from hexgame.coords import Coords, column_to_letters
from hexgame.enums import CellState

SYMBOLS = {
    CellState.EMPTY: ".",
    CellState.BLACK: "●",
    CellState.WHITE: "○",
}

HIGHLIGHT_SYMBOL = "*"


ANSI_CODES = {
    'red': '\033[31m',
    'blue': '\033[34m',
}
ANSI_RESET = '\033[0m'


def ansi_colored(text: str, color: str) -> str:
    """Wrap text in an ANSI color code; unknown colors leave the text plain."""
    code = ANSI_CODES.get(color)
    if code is None:
        return text
    return f"{code}{text}{ANSI_RESET}"


def _column_labels(size: int, indent: int) -> str:
    return " " * indent + "".join(f" {column_to_letters(c)} " for c in range(size))


def board_to_string(board, highlight_move: Optional[Coords] = None, use_color: bool = False) -> str:
    """
    Render a board in the slanted Hex layout.

    Args:
        board: Board to render
        highlight_move: Cell to mark with '*', or None
        use_color: Wrap stones in ANSI colors (Black red, White blue)

    Returns:
        Multi-line string ending in a newline
    """
    size = board.size
    cells = board.cells
    lines = [_column_labels(size, 0)]
    for row in range(size):
        symbols = []
        for column in range(size):
            state = CellState(int(cells[row, column]))
            symbol = SYMBOLS[state]
            if highlight_move is not None and highlight_move == Coords(row, column):
                symbol = HIGHLIGHT_SYMBOL
            elif use_color and state is CellState.BLACK:
                symbol = ansi_colored(symbol, 'red')
            elif use_color and state is CellState.WHITE:
                symbol = ansi_colored(symbol, 'blue')
            symbols.append(symbol)
        lines.append(" " * row + f"{row + 1}\\" + "  ".join(symbols) + f"\\{row + 1}")
    lines.append(_column_labels(size, size + 1))
    return "\n".join(lines) + "\n"


def display_hex_board(board, file: Optional[TextIO] = None, highlight_move: Optional[Coords] = None,
                      color: Optional[bool] = None) -> None:
    """
    Print a board, colored when writing to a terminal.

    Args:
        board: Board to display
        file: file-like object to write to (default: stdout)
        highlight_move: Cell to mark with '*', or None
        color: Force colors on/off; None means color only on a TTY stdout
    """
    if color is None:
        color = file is None and sys.stdout.isatty()
    print(board_to_string(board, highlight_move, use_color=color), end="", file=file or sys.stdout)
