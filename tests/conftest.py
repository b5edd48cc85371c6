"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.notation import STARTING_PLACEMENT
from chessrules.game.controller import TurnController
from chessrules.game.settings import GameSettings

ControllerFactory = Callable[..., TurnController]


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def controller() -> TurnController:
    """Controller at the standard starting position, White to move."""
    return TurnController()


@pytest.fixture
def make_controller() -> ControllerFactory:
    """Factory for controllers set up from a placement string."""

    def _make(
        placement: str = STARTING_PLACEMENT,
        first_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        **kwargs: object,
    ) -> TurnController:
        settings = GameSettings(
            start_placement=placement,
            first_to_move=first_to_move,
            castling=castling,
            **kwargs,  # type: ignore[arg-type]
        )
        return TurnController(settings)

    return _make
