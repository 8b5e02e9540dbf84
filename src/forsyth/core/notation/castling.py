"""Castling availability encoded as a four-bit set.

Each castling option is one bit of a small integer:

    bit 0 (1)  black king side   "k"
    bit 1 (2)  black queen side  "q"
    bit 2 (4)  white king side   "K"
    bit 3 (8)  white queen side  "Q"

Parsing accepts the letters in any order and tolerates duplicates; serializing
always emits them in the canonical order K, Q, k, q.
"""

from dataclasses import dataclass
from enum import IntFlag

from forsyth.core.notation.errors import InvalidCastlingValueError
from forsyth.core.notation.fields import NO_VALUE


class CastlingFlag(IntFlag):
    """Bit weights of the individual castling options."""

    NONE = 0
    BLACK_KING_SIDE = 1
    BLACK_QUEEN_SIDE = 2
    WHITE_KING_SIDE = 4
    WHITE_QUEEN_SIDE = 8
    ALL = 15


_WHITE = CastlingFlag.WHITE_KING_SIDE | CastlingFlag.WHITE_QUEEN_SIDE
_BLACK = CastlingFlag.BLACK_KING_SIDE | CastlingFlag.BLACK_QUEEN_SIDE

# Canonical serialization order
_LETTERS: dict[str, CastlingFlag] = {
    "K": CastlingFlag.WHITE_KING_SIDE,
    "Q": CastlingFlag.WHITE_QUEEN_SIDE,
    "k": CastlingFlag.BLACK_KING_SIDE,
    "q": CastlingFlag.BLACK_QUEEN_SIDE,
}


@dataclass(frozen=True)
class CastlingRights:
    """Immutable set of castling options.

    Attributes:
        value: Bitwise OR of CastlingFlag weights, between 0 and 15.
    """

    value: int = 0

    def __post_init__(self) -> None:
        """Validate the bit range."""
        if not 0 <= self.value <= CastlingFlag.ALL:
            msg = f"Castling value must be between 0 and 15, got {self.value}"
            raise ValueError(msg)

    @classmethod
    def parse(cls, text: str) -> "CastlingRights":
        """Parse the castling field of a FEN string.

        Args:
            text: Letters from "KQkq", or "-" for no castling.

        Returns:
            The parsed castling rights.

        Raises:
            InvalidCastlingValueError: If any character is not one of K, Q, k, q or -.
        """
        result = 0
        for char in text:
            if char == NO_VALUE:
                continue
            flag = _LETTERS.get(char)
            if flag is None:
                raise InvalidCastlingValueError(text)
            result |= flag
        return cls(int(result))

    def _has(self, flag: CastlingFlag) -> bool:
        return self.value & flag == flag

    def is_unavailable(self) -> bool:
        """Return True when no side can castle."""
        return self.value == 0

    def is_black_king_side_available(self) -> bool:
        return self._has(CastlingFlag.BLACK_KING_SIDE)

    def is_black_queen_side_available(self) -> bool:
        return self._has(CastlingFlag.BLACK_QUEEN_SIDE)

    def is_white_king_side_available(self) -> bool:
        return self._has(CastlingFlag.WHITE_KING_SIDE)

    def is_white_queen_side_available(self) -> bool:
        return self._has(CastlingFlag.WHITE_QUEEN_SIDE)

    def without_white(self) -> "CastlingRights":
        """Return a copy with both white options removed."""
        return CastlingRights(int(self.value & ~_WHITE))

    def without_black(self) -> "CastlingRights":
        """Return a copy with both black options removed."""
        return CastlingRights(int(self.value & ~_BLACK))

    def serialize(self) -> str:
        """Return the options in K, Q, k, q order.

        An empty string is returned when nothing is available; substituting "-"
        is left to the caller.
        """
        return "".join(letter for letter, flag in _LETTERS.items() if self._has(flag))

    def __str__(self) -> str:
        return self.serialize()
