"""Tests for TurnState and MoveRecord."""

import pytest

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import A1, E1, E8, H8, parse_square
from chessrules.game.interfaces import TurnPhase
from chessrules.game.settings import GameSettings
from chessrules.game.state import MoveRecord, TurnState


def _state(placement: str | None = None, **kwargs) -> TurnState:
    state = TurnState()
    if placement is not None:
        kwargs["start_placement"] = placement
    state.setup(GameSettings(**kwargs))
    return state


class TestSetup:
    def test_defaults(self) -> None:
        state = _state()
        assert state.current_color == Color.WHITE
        assert state.turn_number == 1
        assert state.phase == TurnPhase.AWAITING_SELECTION
        assert state.selection is None
        assert state.castling == CastlingRights.ALL
        assert state.check_flags == {Color.WHITE: False, Color.BLACK: False}

    def test_king_positions(self) -> None:
        state = _state()
        assert state.king_position(Color.WHITE) == E1
        assert state.king_position(Color.BLACK) == E8

    def test_check_flags_from_placement(self) -> None:
        state = _state("4k3/8/8/8/8/8/8/4K2r", castling=CastlingRights.NONE)
        assert state.in_check(Color.WHITE)
        assert not state.in_check(Color.BLACK)

    def test_missing_white_king(self) -> None:
        with pytest.raises(ValueError, match="no WHITE king"):
            _state("4k3/8/8/8/8/8/8/8")

    def test_extra_king_rejected(self) -> None:
        with pytest.raises(ValueError, match="has 2 BLACK kings"):
            _state("kk6/8/8/8/8/8/8/4K3", castling=CastlingRights.NONE)

    def test_side_not_to_move_in_check(self) -> None:
        with pytest.raises(ValueError, match="Side not to move is in check"):
            _state("4k3/8/8/8/8/8/8/4K2r", first_to_move=Color.BLACK)

    def test_setup_resets_bookkeeping(self) -> None:
        state = _state()
        state.turn_number = 12
        state.selection = A1
        state.setup(GameSettings(first_to_move=Color.BLACK))
        assert state.turn_number == 1
        assert state.selection is None
        assert state.current_color == Color.BLACK


class TestBookkeeping:
    def test_flip_turn(self) -> None:
        state = _state()
        state.flip_turn()
        assert state.current_color == Color.BLACK
        assert state.turn_number == 2
        state.flip_turn()
        assert state.current_color == Color.WHITE
        assert state.turn_number == 3

    def test_revoke_castling_is_monotone(self) -> None:
        state = _state()
        state.revoke_castling(H8)
        assert state.castling == CastlingRights.ALL & ~CastlingRights.BLACK_KINGSIDE
        state.revoke_castling(parse_square("d4"))
        assert state.castling == CastlingRights.ALL & ~CastlingRights.BLACK_KINGSIDE
        state.revoke_color_castling(Color.WHITE)
        assert state.castling == CastlingRights.BLACK_QUEENSIDE

    def test_decay_only_touches_one_side(self) -> None:
        state = _state()
        e2, e7 = parse_square("e2"), parse_square("e7")
        state.board[e2] = state.board[e2].double_stepped()  # type: ignore[union-attr]
        state.board[e7] = state.board[e7].double_stepped()  # type: ignore[union-attr]
        state.decay_en_passant(Color.WHITE)
        assert not state.board[e2].is_marked  # type: ignore[union-attr]
        assert state.board[e7].is_marked  # type: ignore[union-attr]

    def test_en_passant_candidates(self) -> None:
        state = _state()
        d7 = parse_square("d7")
        state.board[d7] = state.board[d7].double_stepped()  # type: ignore[union-attr]
        assert state.en_passant_candidates(Color.BLACK) == [d7]
        assert state.en_passant_candidates(Color.WHITE) == []

    def test_selected_piece(self) -> None:
        state = _state()
        assert state.selected_piece is None
        state.selection = parse_square("g1")
        assert state.selected_piece == Piece(Color.WHITE, PieceType.KNIGHT)


class TestMoveRecord:
    def test_quiet_move(self) -> None:
        record = MoveRecord(
            color=Color.WHITE,
            piece=Piece(Color.WHITE, PieceType.KNIGHT),
            from_sq=parse_square("g1"),
            to_sq=parse_square("f3"),
            turn_number=1,
        )
        assert not record.was_capture
        assert record.promotion is None

    def test_capture(self) -> None:
        record = MoveRecord(
            color=Color.BLACK,
            piece=Piece(Color.BLACK, PieceType.PAWN),
            from_sq=parse_square("d5"),
            to_sq=parse_square("e4"),
            turn_number=4,
            captured=Piece(Color.WHITE, PieceType.PAWN),
        )
        assert record.was_capture
