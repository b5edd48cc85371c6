"""GameSession — one controller plus one cursor, fed by intents.

Quick start::

    from chessrules.game import GameSession, Intent

    session = GameSession()
    session.handle(Intent.UP)       # cursor e1 → e2
    session.handle(Intent.SELECT)   # pick up the e-pawn
    session.handle(Intent.UP)
    session.handle(Intent.UP)       # cursor on e4
    session.handle(Intent.DROP)     # 1. e4
"""

from __future__ import annotations

from chessrules.core.enums import PieceType
from chessrules.game.controller import CommandResult, TurnController
from chessrules.game.cursor import Cursor
from chessrules.game.interfaces import Intent
from chessrules.game.settings import GameSettings
from chessrules.game.state import TurnState


# Board orientation is White's: UP heads toward rank 8.
_NAVIGATION: dict[Intent, tuple[int, int]] = {
    Intent.UP: (0, 1),
    Intent.DOWN: (0, -1),
    Intent.LEFT: (-1, 0),
    Intent.RIGHT: (1, 0),
}

_NAVIGATED = CommandResult(True)


class GameSession:
    """Owns the game for the lifetime of the process; nothing is persisted."""

    __slots__ = ("controller", "cursor")

    def __init__(self, settings: GameSettings | None = None) -> None:
        settings = settings or GameSettings()
        self.controller = TurnController(settings)
        self.cursor = Cursor(settings.cursor_start, settings.wrap_cursor)

    @property
    def state(self) -> TurnState:
        return self.controller.state

    def new_game(self, settings: GameSettings | None = None) -> None:
        settings = settings or GameSettings()
        self.controller.new_game(settings)
        self.cursor = Cursor(settings.cursor_start, settings.wrap_cursor)

    def handle(
        self, intent: Intent, choice: PieceType | None = None
    ) -> CommandResult:
        """Apply one intent at the cursor square.

        *choice* is only read for :attr:`Intent.PROMOTE`.
        """
        step = _NAVIGATION.get(intent)
        if step is not None:
            self.cursor.move(*step)
            return _NAVIGATED

        sq = self.cursor.square
        if intent == Intent.SELECT:
            return self.controller.select(sq)
        if intent == Intent.DROP:
            return self.controller.drop(sq)
        if intent == Intent.CASTLE:
            return self.controller.castle(sq)
        if intent == Intent.PROMOTE:
            return self.controller.resolve_promotion(choice)

        raise ValueError(f"Unknown intent: {intent!r}")
