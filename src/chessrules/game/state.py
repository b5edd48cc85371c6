"""Turn state — the single owned record of a game in progress."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.castling import VARIANTS, revoked_rights
from chessrules.core.check import is_in_check
from chessrules.core.enums import (
    CastlingRights,
    CastlingSide,
    Color,
    MoveFlag,
    PieceType,
)
from chessrules.core.notation import placement_from_text
from chessrules.core.piece import Piece
from chessrules.core.types import Square
from chessrules.game.interfaces import TurnPhase
from chessrules.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """One applied ply."""

    color: Color
    piece: Piece
    from_sq: Square
    to_sq: Square
    turn_number: int
    flag: MoveFlag = MoveFlag.NORMAL
    captured: Piece | None = None
    promotion: PieceType | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class TurnState:
    """Board plus turn bookkeeping, mutated only by the turn controller.

    The king-position cache lives on the board and moves with every write,
    so it is updated in the same step as the move that relocates a king.
    ``check_flags`` are derived: :meth:`refresh_check_flags` recomputes them
    after every board change.
    """

    board: Board = field(default_factory=Board.initial)
    current_color: Color = Color.WHITE
    turn_number: int = 1
    castling: CastlingRights = CastlingRights.ALL
    phase: TurnPhase = TurnPhase.AWAITING_SELECTION
    selection: Square | None = None
    pending_promotion: Square | None = None
    pending_record: MoveRecord | None = None
    last_move: MoveRecord | None = None
    check_flags: dict[Color, bool] = field(
        default_factory=lambda: {Color.WHITE: False, Color.BLACK: False}
    )

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, settings: GameSettings | None = None) -> None:
        """Initialise (or reset) the game from *settings*."""
        settings = settings or GameSettings()
        board = placement_from_text(settings.start_placement)
        for color in Color:
            kings = len(board.pieces(color, PieceType.KING))
            if kings == 0:
                raise ValueError(
                    f"Placement has no {color.name} king: {settings.start_placement!r}"
                )
            if kings > 1:
                raise ValueError(
                    f"Placement has {kings} {color.name} kings: "
                    f"{settings.start_placement!r}"
                )
        if is_in_check(board, settings.first_to_move.opposite):
            raise ValueError(
                f"Side not to move is in check: {settings.start_placement!r}"
            )

        self.board = board
        self.current_color = settings.first_to_move
        self.turn_number = 1
        self.castling = self._sanitise_castling(settings.castling)
        self.phase = TurnPhase.AWAITING_SELECTION
        self.selection = None
        self.pending_promotion = None
        self.pending_record = None
        self.last_move = None
        self.refresh_check_flags()

    def _sanitise_castling(self, castling: CastlingRights) -> CastlingRights:
        """Drop rights whose king or rook is not on its home square."""
        for (color, side), v in VARIANTS.items():
            right = CastlingRights.for_side(color, side)
            if not castling & right:
                continue
            king = self.board[v.king_from]
            rook = self.board[v.rook_from]
            if king != Piece(color, PieceType.KING) or rook != Piece(
                color, PieceType.ROOK
            ):
                _LOGGER.warning(
                    "Dropping %s %s castling right: pieces not on home squares",
                    color,
                    "kingside" if side == CastlingSide.KINGSIDE else "queenside",
                )
                castling &= ~right
        return castling

    # ── Bookkeeping ──────────────────────────────────────────────────────

    def king_position(self, color: Color) -> Square:
        return self.board.king_square(color)

    def in_check(self, color: Color) -> bool:
        return self.check_flags[color]

    def refresh_check_flags(self) -> None:
        for color in Color:
            self.check_flags[color] = is_in_check(self.board, color)

    def revoke_castling(self, *squares: Square) -> None:
        """Revoke rights tied to any home square among *squares*.

        Rights only ever go from granted to revoked.
        """
        self.castling = revoked_rights(self.castling, *squares)

    def revoke_color_castling(self, color: Color) -> None:
        self.castling &= ~CastlingRights.for_color(color)

    def decay_en_passant(self, color: Color) -> None:
        """Clear the double-step markers on *color*'s pawns."""
        for sq, piece in list(self.board.occupied()):
            if piece.color == color and piece.is_marked:
                self.board[sq] = piece.decayed()

    def flip_turn(self) -> None:
        self.current_color = self.current_color.opposite
        self.turn_number += 1

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def selected_piece(self) -> Piece | None:
        if self.selection is None:
            return None
        return self.board[self.selection]

    def en_passant_candidates(self, color: Color) -> list[Square]:
        """Squares of *color*'s pawns currently capturable en passant."""
        return [
            sq
            for sq, piece in self.board.occupied()
            if piece.color == color and piece.en_passant_capturable
        ]
