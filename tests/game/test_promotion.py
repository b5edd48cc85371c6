"""Tests for promotion choosers."""

import logging

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.types import parse_square
from chessrules.game.interfaces import IPromotionChooser, RejectReason, TurnPhase
from chessrules.game.promotion import CallbackPromotionChooser, FixedPromotionChooser


class TestFixedPromotionChooser:
    def test_auto_queen(self) -> None:
        chooser = FixedPromotionChooser()
        assert chooser.piece_type == PieceType.QUEEN
        assert chooser.choose(Color.WHITE, parse_square("a8")) == PieceType.QUEEN

    def test_fixed_underpromotion(self) -> None:
        chooser = FixedPromotionChooser(PieceType.KNIGHT)
        assert chooser.choose(Color.BLACK, parse_square("h1")) == PieceType.KNIGHT

    def test_is_a_chooser(self) -> None:
        assert isinstance(FixedPromotionChooser(), IPromotionChooser)


class TestCallbackPromotionChooser:
    def test_forwards_arguments(self) -> None:
        calls = []

        def _ask(color: Color, square: tuple[int, int]) -> PieceType:
            calls.append((color, square))
            return PieceType.ROOK

        chooser = CallbackPromotionChooser(_ask)
        assert chooser.choose(Color.WHITE, parse_square("c8")) == PieceType.ROOK
        assert calls == [(Color.WHITE, parse_square("c8"))]

    def test_used_by_controller(self, make_controller) -> None:
        asked = []

        def _ask(color: Color, square: tuple[int, int]) -> PieceType:
            asked.append(square)
            return PieceType.BISHOP

        ctrl = make_controller(
            "4k3/P7/8/8/8/8/8/4K3",
            castling=CastlingRights.NONE,
            promotion_chooser=CallbackPromotionChooser(_ask),
        )
        ctrl.select(parse_square("a7"))
        result = ctrl.drop(parse_square("a8"))
        assert result.record is not None
        assert result.record.promotion == PieceType.BISHOP
        assert asked == [parse_square("a8")]

    def test_bad_answer_leaves_promotion_pending(self, make_controller, caplog) -> None:
        caplog.set_level(logging.WARNING, logger="chessrules.game.controller")
        ctrl = make_controller(
            "4k3/P7/8/8/8/8/8/4K3",
            castling=CastlingRights.NONE,
            promotion_chooser=CallbackPromotionChooser(lambda c, s: PieceType.KING),
        )
        rejected = []
        ctrl.events.on_rejected.append(lambda cmd, reason: rejected.append(reason))
        ctrl.select(parse_square("a7"))
        assert ctrl.drop(parse_square("a8"))
        assert ctrl.phase == TurnPhase.PROMOTION_PENDING
        assert rejected == [RejectReason.INVALID_PROMOTION_CHOICE]
        assert "Promotion chooser returned" in caplog.text
        assert ctrl.resolve_promotion(PieceType.QUEEN)
        assert ctrl.current_color == Color.BLACK

    def test_chooser_swappable(self, controller) -> None:
        chooser = FixedPromotionChooser()
        controller.promotion_chooser = chooser
        assert controller.promotion_chooser is chooser
