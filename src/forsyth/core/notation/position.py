"""Chess positions decoded from Forsyth-Edwards Notation."""

from typing import Any

import chess
from loguru import logger

from forsyth.core.notation.castling import CastlingRights
from forsyth.core.notation.errors import error_for_result
from forsyth.core.notation.fields import (
    DEFAULT_POSITION,
    FIELD_SEPARATOR,
    NO_VALUE,
    ROW_SEPARATOR,
    FenField,
    Turn,
)
from forsyth.core.notation.validation import validate_fen


class FenPosition:
    """An immutable, validated FEN position.

    The constructor validates the string and decodes its six fields. Invalid
    strings raise an InvalidFenError subclass and no instance is created.

    Example:
        >>> position = FenPosition("rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6 0 2")
        >>> position.en_passant_target
        'c6'
        >>> position.serialize_epd()
        'rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6'
    """

    __slots__ = (
        "_piece_placement",
        "_turn",
        "_castling",
        "_en_passant_target",
        "_half_move_clock",
        "_full_move_number",
    )

    def __init__(self, fen: str) -> None:
        """Parse and validate a FEN string.

        Args:
            fen: FEN string with six single-space separated fields.

        Raises:
            InvalidFenError: The subclass matching the first failed check.
        """
        result = validate_fen(fen)
        if not result.is_valid:
            error = error_for_result(result, fen)
            logger.debug(f"Cannot build position: {error}")
            raise error

        fields = fen.split(FIELD_SEPARATOR)
        en_passant = fields[FenField.EN_PASSANT]

        set_field = object.__setattr__
        set_field(self, "_piece_placement", fields[FenField.PIECES])
        set_field(self, "_turn", Turn(fields[FenField.TURN]))
        set_field(self, "_castling", CastlingRights.parse(fields[FenField.CASTLING]))
        set_field(self, "_en_passant_target", None if en_passant == NO_VALUE else en_passant)
        set_field(self, "_half_move_clock", int(fields[FenField.HALF_MOVE_CLOCK]))
        set_field(self, "_full_move_number", int(fields[FenField.MOVE_NUMBER]))

    @classmethod
    def default(cls) -> "FenPosition":
        """Return the standard starting position."""
        return cls(DEFAULT_POSITION)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @property
    def piece_placement(self) -> str:
        return self._piece_placement

    @property
    def rows(self) -> list[str]:
        """Piece placement rows from rank 8 down to rank 1."""
        return self._piece_placement.split(ROW_SEPARATOR)

    @property
    def turn(self) -> Turn:
        return self._turn

    def is_whites_turn(self) -> bool:
        return self._turn is Turn.WHITE

    def is_blacks_turn(self) -> bool:
        return self._turn is Turn.BLACK

    @property
    def castling(self) -> CastlingRights:
        return self._castling

    def can_castle_white_king_side(self) -> bool:
        return self._castling.is_white_king_side_available()

    def can_castle_white_queen_side(self) -> bool:
        return self._castling.is_white_queen_side_available()

    def can_castle_black_king_side(self) -> bool:
        return self._castling.is_black_king_side_available()

    def can_castle_black_queen_side(self) -> bool:
        return self._castling.is_black_queen_side_available()

    @property
    def en_passant_target(self) -> str | None:
        """The square behind a pawn that just advanced two ranks, if any."""
        return self._en_passant_target

    @property
    def half_move_clock(self) -> int:
        return self._half_move_clock

    @property
    def full_move_number(self) -> int:
        return self._full_move_number

    def _castling_field(self) -> str:
        return NO_VALUE if self._castling.is_unavailable() else self._castling.serialize()

    def serialize(self) -> str:
        """Return the position as a six-field FEN string."""
        return FIELD_SEPARATOR.join(
            (
                self._piece_placement,
                self._turn.value,
                self._castling_field(),
                self._en_passant_target or NO_VALUE,
                str(self._half_move_clock),
                str(self._full_move_number),
            )
        )

    def serialize_epd(self) -> str:
        """Return the EPD-style prefix: placement, turn, castling and en passant.

        The move counters are dropped, and the en passant field is left out
        entirely when there is no target square.
        """
        fields = [self._piece_placement, self._turn.value, self._castling_field()]
        if self._en_passant_target is not None:
            fields.append(self._en_passant_target)
        return FIELD_SEPARATOR.join(fields)

    def to_board(self) -> chess.Board:
        """Build a python-chess board for this position.

        Zero-length empty runs ("0") are dropped from the placement first, since
        python-chess only accepts run lengths 1 to 8.
        """
        placement = ROW_SEPARATOR.join(row.replace("0", "") for row in self.rows)
        fields = self.serialize().split(FIELD_SEPARATOR)
        fields[FenField.PIECES] = placement
        return chess.Board(FIELD_SEPARATOR.join(fields))

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.serialize()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FenPosition):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __hash__(self) -> int:
        return hash(self.serialize())
