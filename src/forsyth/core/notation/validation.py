"""Structural validation of FEN strings.

The validator classifies a raw string as valid or maps it to exactly one
failure reason. Checks run in a fixed order and the first failing check
decides the result, so a string that breaks several rules always reports
the same one:

    1. field count
    2. full-move number
    3. half-move clock
    4. en passant square
    5. castling field
    6. side to move
    7. piece placement (row count, then each row in order)
    8. en passant square against the side to move

Validation is purely syntactic. Positions with several kings, no kings or a
side in check are accepted.
"""

import re
from collections.abc import Callable, Sequence
from enum import Enum

from loguru import logger

from forsyth.core.notation.fields import (
    DIGITS,
    FIELD_COUNT,
    FIELD_SEPARATOR,
    NO_VALUE,
    PIECE_SYMBOLS,
    ROW_COUNT,
    ROW_SEPARATOR,
    ROW_WIDTH,
    FenField,
    Turn,
)

_NUMBER_PATTERN = re.compile(r"[0-9]+")
_EN_PASSANT_PATTERN = re.compile(r"-|[a-h][36]")
_CASTLING_PATTERN = re.compile(r"-|[KQkq]+")
_TURN_PATTERN = re.compile(r"[wb]")


class ValidationResult(Enum):
    """Outcome of validating a FEN string."""

    VALID = 0
    EN_PASSANT_INVALID_MOVE = 1
    EN_PASSANT_INVALID_SQUARE = 2
    FIELD_COUNT_TOO_LARGE = 3
    FIELD_COUNT_TOO_SMALL = 4
    INVALID_CASTLING_PIECE = 5
    INVALID_TURN = 6
    HALFMOVE_COUNTER_NAN = 7
    MOVE_NUMBER_NAN = 8
    MOVE_NUMBER_POSITIVE = 9
    PIECE_CONSECUTIVE_NUMBERS = 10
    PIECE_INVALID = 11
    PIECE_NOT_ENOUGH_ROWS = 12
    PIECE_ROW_TOO_SMALL = 13
    PIECE_ROW_TOO_LARGE = 14
    PIECE_TOO_MANY_ROWS = 15

    @property
    def is_valid(self) -> bool:
        return self is ValidationResult.VALID

    @property
    def description(self) -> str:
        """Human-readable explanation of the result."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ValidationResult.VALID: "The FEN string is valid.",
    ValidationResult.EN_PASSANT_INVALID_MOVE: (
        "The en passant square does not match the side to move."
    ),
    ValidationResult.EN_PASSANT_INVALID_SQUARE: (
        "The en passant field must be '-' or a square on rank 3 or 6."
    ),
    ValidationResult.FIELD_COUNT_TOO_LARGE: "The FEN string has more than 6 fields.",
    ValidationResult.FIELD_COUNT_TOO_SMALL: "The FEN string has fewer than 6 fields.",
    ValidationResult.INVALID_CASTLING_PIECE: (
        "The castling field must be '-' or a combination of K, Q, k and q."
    ),
    ValidationResult.INVALID_TURN: "The side to move must be 'w' or 'b'.",
    ValidationResult.HALFMOVE_COUNTER_NAN: "The half-move clock is not a number.",
    ValidationResult.MOVE_NUMBER_NAN: "The full-move number is not a number.",
    ValidationResult.MOVE_NUMBER_POSITIVE: "The full-move number must be at least 1.",
    ValidationResult.PIECE_CONSECUTIVE_NUMBERS: (
        "A piece placement row contains two consecutive digits."
    ),
    ValidationResult.PIECE_INVALID: "A piece placement row contains an unknown piece.",
    ValidationResult.PIECE_NOT_ENOUGH_ROWS: "The piece placement has fewer than 8 rows.",
    ValidationResult.PIECE_ROW_TOO_SMALL: "A piece placement row covers fewer than 8 squares.",
    ValidationResult.PIECE_ROW_TOO_LARGE: "A piece placement row covers more than 8 squares.",
    ValidationResult.PIECE_TOO_MANY_ROWS: "The piece placement has more than 8 rows.",
}

# Each check inspects the already split fields and returns None when it passes
Check = Callable[[Sequence[str]], ValidationResult | None]


def _is_number(value: str) -> bool:
    return _NUMBER_PATTERN.fullmatch(value) is not None


def _check_move_number(fields: Sequence[str]) -> ValidationResult | None:
    value = fields[FenField.MOVE_NUMBER]
    if not _is_number(value):
        return ValidationResult.MOVE_NUMBER_NAN
    if int(value) < 1:
        return ValidationResult.MOVE_NUMBER_POSITIVE
    return None


def _check_half_move_clock(fields: Sequence[str]) -> ValidationResult | None:
    if not _is_number(fields[FenField.HALF_MOVE_CLOCK]):
        return ValidationResult.HALFMOVE_COUNTER_NAN
    return None


def _check_en_passant_square(fields: Sequence[str]) -> ValidationResult | None:
    if _EN_PASSANT_PATTERN.fullmatch(fields[FenField.EN_PASSANT]) is None:
        return ValidationResult.EN_PASSANT_INVALID_SQUARE
    return None


def _check_castling(fields: Sequence[str]) -> ValidationResult | None:
    if _CASTLING_PATTERN.fullmatch(fields[FenField.CASTLING]) is None:
        return ValidationResult.INVALID_CASTLING_PIECE
    return None


def _check_turn(fields: Sequence[str]) -> ValidationResult | None:
    if _TURN_PATTERN.fullmatch(fields[FenField.TURN]) is None:
        return ValidationResult.INVALID_TURN
    return None


def _check_row(row: str) -> ValidationResult | None:
    """Validate a single rank of the piece placement."""
    squares = 0
    previous_was_digit = False

    for char in row:
        if char in DIGITS:
            if previous_was_digit:
                return ValidationResult.PIECE_CONSECUTIVE_NUMBERS
            squares += int(char)
            previous_was_digit = True
        else:
            if char not in PIECE_SYMBOLS:
                return ValidationResult.PIECE_INVALID
            squares += 1
            previous_was_digit = False

    if squares < ROW_WIDTH:
        return ValidationResult.PIECE_ROW_TOO_SMALL
    if squares > ROW_WIDTH:
        return ValidationResult.PIECE_ROW_TOO_LARGE
    return None


def _check_piece_placement(fields: Sequence[str]) -> ValidationResult | None:
    rows = fields[FenField.PIECES].split(ROW_SEPARATOR)

    if len(rows) < ROW_COUNT:
        return ValidationResult.PIECE_NOT_ENOUGH_ROWS
    if len(rows) > ROW_COUNT:
        return ValidationResult.PIECE_TOO_MANY_ROWS

    for row in rows:
        result = _check_row(row)
        if result is not None:
            return result
    return None


def _check_en_passant_turn(fields: Sequence[str]) -> ValidationResult | None:
    """Reject a rank 3 target with white to move and a rank 6 target with black to move."""
    square = fields[FenField.EN_PASSANT]
    if square == NO_VALUE:
        return None

    rank, turn = square[1], fields[FenField.TURN]
    if (rank == "3" and turn == Turn.WHITE.value) or (rank == "6" and turn == Turn.BLACK.value):
        return ValidationResult.EN_PASSANT_INVALID_MOVE
    return None


# Order matters: the first failing check determines the result
_CHECKS: tuple[Check, ...] = (
    _check_move_number,
    _check_half_move_clock,
    _check_en_passant_square,
    _check_castling,
    _check_turn,
    _check_piece_placement,
    _check_en_passant_turn,
)


class Validator:
    """Classifies FEN strings into a ValidationResult.

    The validator holds no state; a single instance can be shared freely.
    """

    def validate(self, fen: str) -> ValidationResult:
        """Validate a FEN string.

        Args:
            fen: The raw FEN string. Fields must be separated by single spaces.

        Returns:
            ValidationResult.VALID, or the first failure found.
        """
        fields = fen.split(FIELD_SEPARATOR)

        if len(fields) < FIELD_COUNT:
            result = ValidationResult.FIELD_COUNT_TOO_SMALL
        elif len(fields) > FIELD_COUNT:
            result = ValidationResult.FIELD_COUNT_TOO_LARGE
        else:
            result = next(
                (r for r in (check(fields) for check in _CHECKS) if r is not None),
                ValidationResult.VALID,
            )

        if not result.is_valid:
            logger.debug(f"Rejected FEN {fen!r}: {result.name}")
        return result

    def is_valid(self, fen: str) -> bool:
        """Return True if the FEN string passes every check."""
        return self.validate(fen).is_valid


_DEFAULT_VALIDATOR = Validator()


def validate_fen(fen: str) -> ValidationResult:
    """Validate a FEN string with a shared Validator instance."""
    return _DEFAULT_VALIDATOR.validate(fen)
