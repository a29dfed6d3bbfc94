"""
Error types for the Hex engine.

Every failure is local and recoverable. Each error also derives from the
built-in exception a caller would naturally catch at that seam, so code
written against ValueError/IndexError keeps working.
"""


class HexError(Exception):
    """Base class for all engine errors."""
    pass


class InvalidCoordinate(HexError, ValueError):
    """Raised when coordinate text is malformed or out of range."""

    def __init__(self, text: str, reason: str = ""):
        self.text = text
        message = f"Invalid coordinates: {text!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class OutOfBounds(HexError, IndexError):
    """Raised when a coordinate lies outside the board."""

    def __init__(self, coords, size: int):
        self.coords = coords
        self.size = size
        super().__init__(f"Coordinates {coords} are out of bounds for board size {size}")


class CellOccupied(HexError, ValueError):
    """Raised when a stone is placed on a non-empty cell."""

    def __init__(self, coords):
        self.coords = coords
        super().__init__(f"Cell {coords} is already occupied")


class GameOver(HexError, RuntimeError):
    """Raised when a move is attempted after the game has finished."""

    def __init__(self, winner=None):
        self.winner = winner
        message = "Game has ended"
        if winner is not None:
            message += f": {winner} won"
        super().__init__(message)


class InvalidState(HexError, ValueError):
    """Raised when a serialized game cannot be loaded."""
    pass
