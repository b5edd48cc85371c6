"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import CastlingRights, Color
from chessrules.core.notation import STARTING_PLACEMENT
from chessrules.core.types import E1, Square
from chessrules.game.interfaces import IPromotionChooser


@dataclass
class GameSettings:
    """All configurable settings of a game session."""

    # Position
    start_placement: str = STARTING_PLACEMENT
    first_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL

    # Cursor
    cursor_start: Square = E1
    wrap_cursor: bool = True

    # Promotion; None parks the turn until resolve_promotion() is called
    promotion_chooser: IPromotionChooser | None = None
