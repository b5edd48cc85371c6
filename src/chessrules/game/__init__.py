"""Game management layer — turn state machine, settings, cursor, session.

Quick start::

    from chessrules.core import parse_square
    from chessrules.game import TurnController

    ctrl = TurnController()
    ctrl.select(parse_square("e2"))
    ctrl.drop(parse_square("e4"))
"""

from chessrules.game.controller import CommandResult, GameEvents, TurnController
from chessrules.game.cursor import Cursor
from chessrules.game.interfaces import (
    Intent,
    IPromotionChooser,
    RejectReason,
    TurnPhase,
)
from chessrules.game.promotion import CallbackPromotionChooser, FixedPromotionChooser
from chessrules.game.session import GameSession
from chessrules.game.settings import GameSettings
from chessrules.game.state import MoveRecord, TurnState

__all__ = [
    # Interfaces
    "IPromotionChooser",
    "Intent",
    "RejectReason",
    "TurnPhase",
    # Concrete
    "CallbackPromotionChooser",
    "CommandResult",
    "Cursor",
    "FixedPromotionChooser",
    "GameEvents",
    "GameSession",
    "GameSettings",
    "MoveRecord",
    "TurnController",
    "TurnState",
]
