"""Concrete promotion choosers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from chessrules.core.enums import PieceType
from chessrules.game.interfaces import IPromotionChooser

if TYPE_CHECKING:
    from chessrules.core.enums import Color
    from chessrules.core.types import Square


class FixedPromotionChooser(IPromotionChooser):
    """Always promotes to the same piece (auto-queen by default)."""

    __slots__ = ("_piece_type",)

    def __init__(self, piece_type: PieceType = PieceType.QUEEN) -> None:
        self._piece_type = piece_type

    @property
    def piece_type(self) -> PieceType:
        return self._piece_type

    def choose(self, color: Color, square: Square) -> PieceType:
        return self._piece_type


class CallbackPromotionChooser(IPromotionChooser):
    """Delegates the choice to a callable, typically a blocking prompt.

    Args:
        on_choose: ``(Color, Square) -> PieceType`` — asked once per
            promotion; its return value is validated by the controller.
    """

    __slots__ = ("_on_choose",)

    def __init__(self, on_choose: Callable[[Color, Square], PieceType]) -> None:
        self._on_choose = on_choose

    def choose(self, color: Color, square: Square) -> PieceType:
        return self._on_choose(color, square)
