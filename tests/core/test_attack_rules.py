"""Tests for attack legality and en passant."""

from chessrules.core.attack_rules import (
    can_attack,
    en_passant_rank,
    en_passant_victim,
    is_en_passant_capture,
)
from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.notation import placement_from_text
from chessrules.core.piece import Piece
from chessrules.core.types import parse_square


def _attack(board: Board, from_name: str, to_name: str) -> bool:
    from_sq = parse_square(from_name)
    piece = board[from_sq]
    assert piece is not None, f"no piece on {from_name}"
    return can_attack(board, piece, from_sq, parse_square(to_name))


def _en_passant_board(capturable: bool = True) -> Board:
    """White pawn on e5 beside a black pawn that just reached d5."""
    board = placement_from_text("4k3/8/8/3pP3/8/8/8/4K3")
    if capturable:
        d5 = parse_square("d5")
        board[d5] = board[d5].double_stepped()  # type: ignore[union-attr]
    return board


class TestPawnAttack:
    def test_diagonal_enemy(self) -> None:
        board = placement_from_text("4k3/8/8/8/3p1p2/4P3/8/4K3")
        assert _attack(board, "e3", "d4")
        assert _attack(board, "e3", "f4")

    def test_diagonal_empty_square(self) -> None:
        board = placement_from_text("4k3/8/8/8/3p4/4P3/8/4K3")
        assert not _attack(board, "e3", "f4")

    def test_forward_is_not_an_attack(self) -> None:
        board = placement_from_text("4k3/8/8/8/4p3/4P3/8/4K3")
        assert not _attack(board, "e3", "e4")

    def test_backward_diagonal_is_not_an_attack(self) -> None:
        board = placement_from_text("4k3/8/8/8/8/4P3/3p4/4K3")
        assert not _attack(board, "e3", "d2")

    def test_black_pawn_attacks_downward(self) -> None:
        board = placement_from_text("4k3/8/3p4/4P3/8/8/8/4K3")
        assert _attack(board, "d6", "e5")

    def test_friendly_target(self) -> None:
        board = Board.initial()
        assert not _attack(board, "e2", "d1")


class TestEnPassant:
    def test_fifth_ranks(self) -> None:
        assert en_passant_rank(Color.WHITE) == 4
        assert en_passant_rank(Color.BLACK) == 3

    def test_capture_onto_empty_square(self) -> None:
        board = _en_passant_board()
        assert _attack(board, "e5", "d6")
        pawn = board[parse_square("e5")]
        assert pawn is not None
        assert en_passant_victim(
            board, pawn, parse_square("e5"), parse_square("d6")
        ) == parse_square("d5")

    def test_no_capture_without_marker(self) -> None:
        board = _en_passant_board(capturable=False)
        assert not _attack(board, "e5", "d6")

    def test_wrong_side_diagonal(self) -> None:
        board = _en_passant_board()
        assert not _attack(board, "e5", "f6")

    def test_only_from_fifth_rank(self) -> None:
        board = placement_from_text("4k3/8/8/8/3pP3/8/8/4K3")
        d4 = parse_square("d4")
        board[d4] = board[d4].double_stepped()  # type: ignore[union-attr]
        assert not _attack(board, "e4", "d5")

    def test_non_pawn_never_captures_en_passant(self) -> None:
        board = _en_passant_board()
        bishop = Piece(Color.WHITE, PieceType.BISHOP)
        assert not is_en_passant_capture(
            board, bishop, parse_square("e5"), parse_square("d6")
        )


class TestPieceAttacks:
    def test_knight_attacks_match_moves(self) -> None:
        board = Board.initial()
        assert _attack(board, "g1", "f3")
        assert not _attack(board, "g1", "e2")

    def test_slider_attacks_first_blocker_only(self) -> None:
        board = placement_from_text("4k3/8/8/r7/p7/8/8/R3K3")
        assert _attack(board, "a1", "a4")
        assert not _attack(board, "a1", "a5")

    def test_king_attacks_defended_square(self) -> None:
        # Kings threaten by geometry even where they could not legally move.
        board = placement_from_text("4k3/8/8/8/8/8/3r4/3rK3")
        assert _attack(board, "e1", "d1")
        assert _attack(board, "e1", "d2")

    def test_off_board(self) -> None:
        board = Board.initial()
        rook = board[parse_square("a1")]
        assert rook is not None
        assert not can_attack(board, rook, (0, 0), (-1, 0))
