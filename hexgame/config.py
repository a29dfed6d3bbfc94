"""
Configuration constants for the Hex engine.

Board size is the only runtime setting; everything else here is fixed.
"""

from hexgame.enums import CellState

# Board geometry
DEFAULT_BOARD_SIZE = 11
MIN_BOARD_SIZE = 1

# Serialized game format. Field names are part of the stored format and
# must not change.
SIZE_FIELD = "size"
CURRENT_PLAYER_FIELD = "currentPlayer"
WINNER_FIELD = "winner"
CELLS_FIELD = "cells"

EMPTY_TOKEN = CellState.EMPTY.value
BLACK_TOKEN = CellState.BLACK.value
WHITE_TOKEN = CellState.WHITE.value

# Logging (only the CLI configures handlers)
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
