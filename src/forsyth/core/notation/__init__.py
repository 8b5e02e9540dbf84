"""FEN parsing, validation and serialization."""

from forsyth.core.notation.castling import CastlingFlag, CastlingRights
from forsyth.core.notation.errors import (
    EnPassantIllegalError,
    EnPassantInvalidSquareError,
    IncorrectFieldCountError,
    IncorrectPiecePlacementRowLengthError,
    IncorrectPiecePlacementRowsLengthError,
    InvalidCastlingPieceError,
    InvalidCastlingValueError,
    InvalidFenError,
    InvalidPiecePlacementError,
    InvalidTurnError,
    UnexpectedFenError,
    WrongHalfMoveCounterError,
    WrongMoveNumberError,
    error_for_result,
)
from forsyth.core.notation.fields import DEFAULT_POSITION, FenField, Turn
from forsyth.core.notation.position import FenPosition
from forsyth.core.notation.validation import ValidationResult, Validator, validate_fen

__all__ = [
    "DEFAULT_POSITION",
    "CastlingFlag",
    "CastlingRights",
    "EnPassantIllegalError",
    "EnPassantInvalidSquareError",
    "FenField",
    "FenPosition",
    "IncorrectFieldCountError",
    "IncorrectPiecePlacementRowLengthError",
    "IncorrectPiecePlacementRowsLengthError",
    "InvalidCastlingPieceError",
    "InvalidCastlingValueError",
    "InvalidFenError",
    "InvalidPiecePlacementError",
    "InvalidTurnError",
    "Turn",
    "UnexpectedFenError",
    "ValidationResult",
    "Validator",
    "WrongHalfMoveCounterError",
    "WrongMoveNumberError",
    "error_for_result",
    "validate_fen",
]
