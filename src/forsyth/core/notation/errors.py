"""Exceptions raised while building positions from FEN strings."""

from forsyth.core.notation.fields import FIELD_COUNT, FIELD_SEPARATOR, FenField
from forsyth.core.notation.validation import ValidationResult


class InvalidCastlingValueError(ValueError):
    """Raised when a castling field contains a character outside K, Q, k, q and -."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'The castling availability field "{value}" contains an invalid value.')


class InvalidFenError(ValueError):
    """Base exception for FEN strings that fail validation.

    Attributes:
        fen: The offending FEN string.
        result: The validation result that caused the error.
    """

    def __init__(self, fen: str, result: ValidationResult, message: str | None = None) -> None:
        self.fen = fen
        self.result = result
        if message is None:
            message = f"Invalid FEN string {fen!r}: {result.description}"
        super().__init__(message)


class UnexpectedFenError(InvalidFenError):
    """Raised for a validation result without a dedicated error."""

    pass


class InvalidCastlingPieceError(InvalidFenError):
    """Raised when the castling field is malformed."""

    pass


class EnPassantIllegalError(InvalidFenError):
    """Raised when the en passant square contradicts the side to move."""

    pass


class EnPassantInvalidSquareError(InvalidFenError):
    """Raised when the en passant field is not '-' or a rank 3/6 square."""

    pass


class IncorrectFieldCountError(InvalidFenError):
    """Raised when the FEN string does not have exactly six fields.

    Attributes:
        field_count: Number of fields actually found.
    """

    def __init__(self, fen: str, result: ValidationResult) -> None:
        self.field_count = len(fen.split(FIELD_SEPARATOR))
        super().__init__(
            fen,
            result,
            f"Invalid FEN string, does not contain {FIELD_COUNT} fields but {self.field_count}.",
        )


class WrongHalfMoveCounterError(InvalidFenError):
    """Raised when the half-move clock is not a non-negative integer."""

    pass


class InvalidTurnError(InvalidFenError):
    """Raised when the side to move is not 'w' or 'b'."""

    def __init__(self, fen: str, result: ValidationResult) -> None:
        fields = fen.split(FIELD_SEPARATOR)
        turn = fields[FenField.TURN] if len(fields) > FenField.TURN else ""
        super().__init__(fen, result, f"Invalid FEN turn provided: {turn}")


class WrongMoveNumberError(InvalidFenError):
    """Raised when the full-move number is not a positive integer."""

    pass


class InvalidPiecePlacementError(InvalidFenError):
    """Raised when a piece placement row has an unknown piece or adjacent digits."""

    pass


class IncorrectPiecePlacementRowLengthError(InvalidFenError):
    """Raised when a piece placement row does not cover exactly 8 squares."""

    pass


class IncorrectPiecePlacementRowsLengthError(InvalidFenError):
    """Raised when the piece placement does not have exactly 8 rows."""

    pass


_ERRORS: dict[ValidationResult, type[InvalidFenError]] = {
    ValidationResult.INVALID_CASTLING_PIECE: InvalidCastlingPieceError,
    ValidationResult.EN_PASSANT_INVALID_MOVE: EnPassantIllegalError,
    ValidationResult.EN_PASSANT_INVALID_SQUARE: EnPassantInvalidSquareError,
    ValidationResult.FIELD_COUNT_TOO_SMALL: IncorrectFieldCountError,
    ValidationResult.FIELD_COUNT_TOO_LARGE: IncorrectFieldCountError,
    ValidationResult.HALFMOVE_COUNTER_NAN: WrongHalfMoveCounterError,
    ValidationResult.INVALID_TURN: InvalidTurnError,
    ValidationResult.MOVE_NUMBER_NAN: WrongMoveNumberError,
    ValidationResult.MOVE_NUMBER_POSITIVE: WrongMoveNumberError,
    ValidationResult.PIECE_INVALID: InvalidPiecePlacementError,
    ValidationResult.PIECE_CONSECUTIVE_NUMBERS: InvalidPiecePlacementError,
    ValidationResult.PIECE_ROW_TOO_SMALL: IncorrectPiecePlacementRowLengthError,
    ValidationResult.PIECE_ROW_TOO_LARGE: IncorrectPiecePlacementRowLengthError,
    ValidationResult.PIECE_NOT_ENOUGH_ROWS: IncorrectPiecePlacementRowsLengthError,
    ValidationResult.PIECE_TOO_MANY_ROWS: IncorrectPiecePlacementRowsLengthError,
}


def error_for_result(result: ValidationResult, fen: str) -> InvalidFenError:
    """Build the exception matching a failed validation.

    Args:
        result: A validation result other than VALID.
        fen: The FEN string that was validated.

    Returns:
        An InvalidFenError subclass instance; UnexpectedFenError for unmapped results.

    Raises:
        ValueError: If result is VALID.
    """
    if result.is_valid:
        msg = "Cannot build an error for a valid FEN string"
        raise ValueError(msg)
    return _ERRORS.get(result, UnexpectedFenError)(fen, result)
