"""Field layout and character sets of the FEN grammar."""

from enum import Enum, IntEnum

# The position at the start of a standard game
DEFAULT_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

FIELD_SEPARATOR = " "
ROW_SEPARATOR = "/"
FIELD_COUNT = 6
ROW_COUNT = 8
ROW_WIDTH = 8

# Lowercase letters are black pieces, uppercase are white pieces
PIECE_SYMBOLS = "pnbrqkPNBRQK"
DIGITS = "0123456789"
NO_VALUE = "-"


class FenField(IntEnum):
    """Index of each field in a space-separated FEN string."""

    PIECES = 0
    TURN = 1
    CASTLING = 2
    EN_PASSANT = 3
    HALF_MOVE_CLOCK = 4
    MOVE_NUMBER = 5


class Turn(str, Enum):
    """Side to move, valued by its FEN character."""

    WHITE = "w"
    BLACK = "b"

    def __str__(self) -> str:
        return self.value
