"""Tests for placement text parsing and serialisation."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.notation import (
    STARTING_PLACEMENT,
    placement_from_text,
    placement_to_text,
)
from chessrules.core.piece import Piece
from chessrules.core.types import parse_square


class TestPlacementParse:
    def test_starting_placement(self) -> None:
        assert placement_from_text(STARTING_PLACEMENT) == Board.initial()

    def test_full_fen_accepted(self) -> None:
        fen = STARTING_PLACEMENT + " w KQkq - 0 1"
        assert placement_from_text(fen) == Board.initial()

    def test_pieces_land_where_named(self) -> None:
        board = placement_from_text("7k/8/8/8/3N4/8/8/K7")
        assert board[parse_square("d4")] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert board.king_square(Color.BLACK) == parse_square("h8")
        assert board.king_square(Color.WHITE) == parse_square("a1")

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "0/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "ppppppppp/8/8/8/8/8/8/8",
            "44p/8/8/8/8/8/8/8",
        ],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            placement_from_text(text)

    def test_bad_piece_letter(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            placement_from_text("7x/8/8/8/8/8/8/8")


class TestPlacementSerialise:
    def test_initial(self) -> None:
        assert placement_to_text(Board.initial()) == STARTING_PLACEMENT

    def test_empty(self) -> None:
        assert placement_to_text(Board()) == "8/8/8/8/8/8/8/8"

    def test_round_trip(self) -> None:
        text = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R"
        assert placement_to_text(placement_from_text(text)) == text
