"""Abstract interfaces and enumerations for the game layer.

The turn controller depends on these, not on concrete choosers or on any
presentation code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.enums import Color, PieceType
    from chessrules.core.types import Square


# ── Turn FSM states ──────────────────────────────────────────────────────────


class TurnPhase(IntEnum):
    """Finite-state-machine states of a single turn.

    A rejected command is a loop back into the current state, not a state
    of its own.
    """

    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()
    PROMOTION_PENDING = auto()


class RejectReason(Enum):
    """Why a command left the session untouched."""

    NOT_CURRENT_PLAYERS_PIECE = "not current player's piece"
    ILLEGAL_MOVE = "illegal move"
    CHECK_UNRESOLVED = "check unresolved"
    KING_EXPOSED = "move exposes own king"
    CASTLING_UNAVAILABLE = "castling unavailable"
    NO_PIECE_SELECTED = "piece not selected"
    PROMOTION_PENDING = "promotion choice pending"
    NO_PROMOTION_PENDING = "no promotion pending"
    INVALID_PROMOTION_CHOICE = "invalid promotion choice"


class Intent(IntEnum):
    """Discrete user intents forwarded by a presentation layer."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SELECT = auto()
    DROP = auto()
    CASTLE = auto()
    PROMOTE = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPromotionChooser(ABC):
    """Supplies the piece a pawn promotes to.

    Called synchronously by the controller; the call blocks the turn until
    it returns.
    """

    @abstractmethod
    def choose(self, color: Color, square: Square) -> PieceType:
        """Pick Queen, Rook, Bishop or Knight for *color*'s pawn on *square*."""
