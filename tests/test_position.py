"""Tests for FenPosition construction, accessors and serialization."""

import chess
import pytest

from forsyth.core.notation import (
    DEFAULT_POSITION,
    CastlingRights,
    FenPosition,
    IncorrectFieldCountError,
    InvalidCastlingPieceError,
    InvalidFenError,
    InvalidTurnError,
    Turn,
    ValidationResult,
)

SICILIAN = "rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6 0 2"
SICILIAN_NF3 = "rnbqkbnr/pp1ppppp/8/2p5/4P3/5N2/PPPP1PPP/RNBQKB1R b KQkq - 1 2"


class TestRoundTrip:
    """serialize() reproduces canonical FEN strings byte for byte."""

    @pytest.mark.parametrize(
        "fen",
        [
            DEFAULT_POSITION,
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR b KQkq - 0 1",
            SICILIAN,
            SICILIAN_NF3,
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
            "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1",
            "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8",
            "4k3/8/8/8/8/8/8/4K3 b - - 99 150",
        ],
    )
    def test_serialize_round_trip(self, fen: str) -> None:
        assert FenPosition(fen).serialize() == fen

    def test_str_is_serialize(self, start_fen: str) -> None:
        assert str(FenPosition(start_fen)) == start_fen

    def test_castling_is_canonicalized(self) -> None:
        position = FenPosition("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w qQkK - 0 1")
        assert position.serialize() == DEFAULT_POSITION

    def test_counters_are_normalized(self) -> None:
        position = FenPosition("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 00 01")
        assert position.serialize() == DEFAULT_POSITION

    def test_no_castling_serializes_as_dash(self) -> None:
        fen = "4k3/8/8/8/8/8/8/4K3 w - - 0 1"
        position = FenPosition(fen)
        assert position.castling.is_unavailable()
        assert position.serialize().split(" ")[2] == "-"


class TestAccessors:
    """Tests for the decoded fields."""

    def test_default_position(self) -> None:
        position = FenPosition.default()
        assert position.piece_placement == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
        assert position.turn is Turn.WHITE
        assert position.castling == CastlingRights.parse("KQkq")
        assert position.en_passant_target is None
        assert position.half_move_clock == 0
        assert position.full_move_number == 1

    def test_rows(self, start_fen: str) -> None:
        rows = FenPosition(start_fen).rows
        assert rows == ["rnbqkbnr", "pppppppp", "8", "8", "8", "8", "PPPPPPPP", "RNBQKBNR"]

    def test_rows_are_rebuilt_on_each_call(self, start_fen: str) -> None:
        position = FenPosition(start_fen)
        rows = position.rows
        rows.clear()
        assert len(position.rows) == 8

    def test_whites_turn(self, start_fen: str) -> None:
        position = FenPosition(start_fen)
        assert position.is_whites_turn()
        assert not position.is_blacks_turn()

    def test_blacks_turn(self) -> None:
        position = FenPosition(SICILIAN_NF3)
        assert position.is_blacks_turn()
        assert not position.is_whites_turn()
        assert position.turn is Turn.BLACK

    def test_castling_predicates(self) -> None:
        position = FenPosition(SICILIAN)
        assert position.can_castle_white_king_side()
        assert position.can_castle_white_queen_side()
        assert position.can_castle_black_king_side()
        assert position.can_castle_black_queen_side()

    def test_partial_castling(self) -> None:
        position = FenPosition("r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1")
        assert not position.can_castle_white_king_side()
        assert not position.can_castle_white_queen_side()
        assert position.can_castle_black_king_side()
        assert position.can_castle_black_queen_side()

    def test_en_passant_target(self) -> None:
        assert FenPosition(SICILIAN).en_passant_target == "c6"

    def test_counters(self) -> None:
        position = FenPosition(SICILIAN_NF3)
        assert position.half_move_clock == 1
        assert position.full_move_number == 2


class TestExtendedPositionDescription:
    """Tests for serialize_epd()."""

    def test_without_en_passant(self, start_fen: str) -> None:
        epd = FenPosition(start_fen).serialize_epd()
        assert epd == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq"

    def test_with_en_passant(self) -> None:
        epd = FenPosition(SICILIAN).serialize_epd()
        assert epd == "rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6"

    def test_without_castling(self) -> None:
        epd = FenPosition("4k3/8/8/8/8/8/8/4K3 b - - 12 40").serialize_epd()
        assert epd == "4k3/8/8/8/8/8/8/4K3 b -"


class TestConstructionErrors:
    """Invalid strings raise InvalidFenError subclasses and build nothing."""

    def test_empty_string(self) -> None:
        with pytest.raises(IncorrectFieldCountError) as exc_info:
            FenPosition("")
        assert exc_info.value.field_count == 1
        assert exc_info.value.result is ValidationResult.FIELD_COUNT_TOO_SMALL
        assert str(exc_info.value) == "Invalid FEN string, does not contain 6 fields but 1."

    def test_invalid_turn(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR r KQkq - 0 1"
        with pytest.raises(InvalidTurnError, match="Invalid FEN turn provided: r"):
            FenPosition(fen)

    def test_invalid_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkqR - 0 1"
        with pytest.raises(InvalidCastlingPieceError) as exc_info:
            FenPosition(fen)
        assert exc_info.value.fen == fen

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            FenPosition("not a fen")

    def test_failure_is_logged(self, log_messages: list[str]) -> None:
        with pytest.raises(InvalidFenError):
            FenPosition("not a fen")
        assert any("Cannot build position" in message for message in log_messages)


class TestValueSemantics:
    """Positions are immutable and compare by their serialized form."""

    def test_cannot_set_attributes(self, start_fen: str) -> None:
        position = FenPosition(start_fen)
        with pytest.raises(AttributeError):
            position.half_move_clock = 3  # type: ignore[misc]
        with pytest.raises(AttributeError):
            position._turn = Turn.BLACK  # type: ignore[misc]
        assert position.serialize() == start_fen

    def test_cannot_delete_attributes(self, start_fen: str) -> None:
        position = FenPosition(start_fen)
        with pytest.raises(AttributeError):
            del position._turn

    def test_equality(self) -> None:
        a = FenPosition(DEFAULT_POSITION)
        b = FenPosition("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w kqKQ - 0 1")
        assert a == b
        assert hash(a) == hash(b)
        assert a != FenPosition(SICILIAN)
        assert a != DEFAULT_POSITION

    def test_repr(self, start_fen: str) -> None:
        assert repr(FenPosition(start_fen)) == f"FenPosition({start_fen!r})"


class TestBoardInterop:
    """Tests for converting positions to python-chess boards."""

    def test_default_position_board(self) -> None:
        board = FenPosition.default().to_board()
        assert board.fen() == chess.STARTING_FEN
        assert board.piece_at(chess.E1) == chess.Piece(chess.KING, chess.WHITE)

    def test_side_to_move_and_counters(self) -> None:
        board = FenPosition(SICILIAN_NF3).to_board()
        assert board.turn == chess.BLACK
        assert board.halfmove_clock == 1
        assert board.fullmove_number == 2
        assert board.piece_at(chess.F3) == chess.Piece(chess.KNIGHT, chess.WHITE)

    def test_castling_rights_carry_over(self) -> None:
        board = FenPosition("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1").to_board()
        assert board.has_kingside_castling_rights(chess.WHITE)
        assert not board.has_queenside_castling_rights(chess.WHITE)
        assert board.has_queenside_castling_rights(chess.BLACK)
        assert not board.has_kingside_castling_rights(chess.BLACK)

    def test_zero_length_runs_are_dropped(self) -> None:
        """A "0" run covers no squares and python-chess only accepts 1 to 8."""
        position = FenPosition("0p7/8/8/8/8/8/8/4K0k2 w - - 0 1")
        board = position.to_board()
        assert board.piece_at(chess.A8) == chess.Piece(chess.PAWN, chess.BLACK)
        assert board.piece_at(chess.E1) == chess.Piece(chess.KING, chess.WHITE)
        assert board.piece_at(chess.F1) == chess.Piece(chess.KING, chess.BLACK)
        assert position.serialize() == "0p7/8/8/8/8/8/8/4K0k2 w - - 0 1"
