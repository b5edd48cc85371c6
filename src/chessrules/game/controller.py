"""TurnController — the state machine that turns intents into plies.

Coordinates: TurnState, the move/attack/castling rules and an optional
promotion chooser.  Emits events via simple callbacks so a presentation
layer / tests can subscribe.  Never writes output itself.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from chessrules.core.attack_rules import can_attack, en_passant_victim
from chessrules.core.castling import apply_castle, can_castle, variant_for_target
from chessrules.core.check import would_be_in_check
from chessrules.core.enums import (
    PROMOTION_TYPES,
    CastlingSide,
    Color,
    MoveFlag,
    PieceType,
)
from chessrules.core.move_rules import can_move, is_double_step, promotion_rank
from chessrules.core.piece import Piece, belongs_to
from chessrules.core.rules import Rules
from chessrules.core.types import Square, square_name
from chessrules.game.interfaces import IPromotionChooser, RejectReason, TurnPhase
from chessrules.game.settings import GameSettings
from chessrules.game.state import MoveRecord, TurnState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "TurnState"], None]
PhaseCallback = Callable[[TurnPhase], None]
RejectCallback = Callable[[str, RejectReason], None]  # command, reason
PromotionCallback = Callable[[Color, Square], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_rejected: list[RejectCallback] = field(default_factory=list)
    on_promotion_requested: list[PromotionCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a command; truthy when it was applied."""

    ok: bool
    reason: RejectReason | None = None
    record: MoveRecord | None = None

    def __bool__(self) -> bool:
        return self.ok


_ACCEPTED = CommandResult(True)


def _castle_flag(side: CastlingSide) -> MoveFlag:
    if side == CastlingSide.KINGSIDE:
        return MoveFlag.CASTLE_KINGSIDE
    return MoveFlag.CASTLE_QUEENSIDE


# ── Controller ───────────────────────────────────────────────────────────────


class TurnController:
    """Validates and applies select / drop / castle / promotion commands.

    Only these four commands mutate the session; everything else is a pure
    query.  Designed to be driven from a single thread.
    """

    __slots__ = ("_state", "_chooser", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._state = TurnState()
        self._chooser: IPromotionChooser | None = None
        self.events = GameEvents()
        self.new_game(settings)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def phase(self) -> TurnPhase:
        return self._state.phase

    @property
    def current_color(self) -> Color:
        return self._state.current_color

    @property
    def promotion_chooser(self) -> IPromotionChooser | None:
        return self._chooser

    @promotion_chooser.setter
    def promotion_chooser(self, chooser: IPromotionChooser | None) -> None:
        self._chooser = chooser

    # ── Setup ────────────────────────────────────────────────────────────

    def new_game(self, settings: GameSettings | None = None) -> None:
        settings = settings or GameSettings()
        self._state.setup(settings)
        self._chooser = settings.promotion_chooser
        _LOGGER.debug(
            "New game: %s to move, castling=%r",
            self._state.current_color,
            self._state.castling,
        )
        self._emit_phase(TurnPhase.AWAITING_SELECTION)

    # ── Queries ──────────────────────────────────────────────────────────

    def can_move(self, from_sq: Square, to_sq: Square) -> bool:
        piece = self._state.board[from_sq]
        return piece is not None and can_move(self._state.board, piece, from_sq, to_sq)

    def can_attack(self, from_sq: Square, to_sq: Square) -> bool:
        piece = self._state.board[from_sq]
        return piece is not None and can_attack(
            self._state.board, piece, from_sq, to_sq
        )

    def can_castle(self, side: CastlingSide, color: Color | None = None) -> bool:
        color = self._state.current_color if color is None else color
        return can_castle(self._state.board, self._state.castling, color, side)

    def is_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self._state.board, color)

    def legal_targets(self, sq: Square) -> list[Square]:
        return Rules.legal_targets(self._state.board, sq)

    def castle_targets(self, sq: Square) -> list[Square]:
        return Rules.castle_targets(self._state.board, self._state.castling, sq)

    # ── Commands ─────────────────────────────────────────────────────────

    def select(self, sq: Square) -> CommandResult:
        """Select the current player's piece on *sq*, or toggle off a selection."""
        st = self._state
        if st.phase == TurnPhase.PROMOTION_PENDING:
            return self._reject("select", RejectReason.PROMOTION_PENDING)

        if st.phase == TurnPhase.PIECE_SELECTED:
            st.selection = None
            self._set_phase(TurnPhase.AWAITING_SELECTION)
            return _ACCEPTED

        if not belongs_to(st.board[sq], st.current_color):
            return self._reject("select", RejectReason.NOT_CURRENT_PLAYERS_PIECE)

        st.selection = sq
        self._set_phase(TurnPhase.PIECE_SELECTED)
        return _ACCEPTED

    def drop(self, target: Square) -> CommandResult:
        """Move the selected piece onto *target* if the rules allow it."""
        st = self._state
        if st.phase == TurnPhase.PROMOTION_PENDING:
            return self._reject("drop", RejectReason.PROMOTION_PENDING)
        piece = st.selected_piece
        if (
            st.phase != TurnPhase.PIECE_SELECTED
            or st.selection is None
            or piece is None
        ):
            return self._reject("drop", RejectReason.NO_PIECE_SELECTED)

        from_sq = st.selection
        board = st.board
        if not (
            can_move(board, piece, from_sq, target)
            or can_attack(board, piece, from_sq, target)
        ):
            return self._reject("drop", RejectReason.ILLEGAL_MOVE)

        if would_be_in_check(board, piece, from_sq, target, piece.color):
            if st.in_check(piece.color):
                return self._reject("drop", RejectReason.CHECK_UNRESOLVED)
            return self._reject("drop", RejectReason.KING_EXPOSED)

        return self._apply_drop(piece, from_sq, target)

    def castle(self, target: Square) -> CommandResult:
        """Castle with the selected king or rook; *target* is its landing square."""
        st = self._state
        if st.phase == TurnPhase.PROMOTION_PENDING:
            return self._reject("castle", RejectReason.PROMOTION_PENDING)
        piece = st.selected_piece
        if (
            st.phase != TurnPhase.PIECE_SELECTED
            or st.selection is None
            or piece is None
        ):
            return self._reject("castle", RejectReason.NO_PIECE_SELECTED)

        v = variant_for_target(piece, st.selection, target)
        if v is None or not can_castle(st.board, st.castling, piece.color, v.side):
            return self._reject("castle", RejectReason.CASTLING_UNAVAILABLE)

        st.decay_en_passant(piece.color.opposite)
        king = st.board[v.king_from]
        apply_castle(st.board, v)
        st.revoke_color_castling(piece.color)

        record = MoveRecord(
            color=piece.color,
            piece=king if king is not None else Piece(piece.color, PieceType.KING),
            from_sq=v.king_from,
            to_sq=v.king_to,
            turn_number=st.turn_number,
            flag=_castle_flag(v.side),
        )
        _LOGGER.debug(
            "Turn %d: %s castles %s",
            st.turn_number,
            piece.color,
            "kingside" if v.side == CastlingSide.KINGSIDE else "queenside",
        )
        return self._complete_turn(record)

    def resolve_promotion(self, choice: PieceType | None) -> CommandResult:
        """Replace the pawn awaiting promotion and finish the deferred turn."""
        st = self._state
        if st.phase != TurnPhase.PROMOTION_PENDING or st.pending_promotion is None:
            return self._reject("promote", RejectReason.NO_PROMOTION_PENDING)
        if choice not in PROMOTION_TYPES:
            return self._reject("promote", RejectReason.INVALID_PROMOTION_CHOICE)

        sq = st.pending_promotion
        pawn = st.board[sq]
        assert pawn is not None and st.pending_record is not None
        promoted_type = PieceType(choice)
        st.board[sq] = pawn.promoted(promoted_type)

        record = replace(
            st.pending_record, flag=MoveFlag.PROMOTION, promotion=promoted_type
        )
        _LOGGER.debug(
            "Turn %d: %s pawn on %s promotes to %s",
            st.turn_number,
            pawn.color,
            square_name(sq),
            promoted_type.name,
        )
        return self._complete_turn(record)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply_drop(
        self, piece: Piece, from_sq: Square, target: Square
    ) -> CommandResult:
        st = self._state
        board = st.board

        # Classify before any bookkeeping touches the pawn flags.
        victim_sq = en_passant_victim(board, piece, from_sq, target)
        double_step = is_double_step(board, piece, from_sq, target)
        captured = board[victim_sq] if victim_sq is not None else board[target]

        st.decay_en_passant(piece.color.opposite)

        board[from_sq] = None
        if victim_sq is not None:
            board[victim_sq] = None
        st.revoke_castling(from_sq, target)

        flag = MoveFlag.NORMAL
        placed = piece
        if double_step:
            placed = piece.double_stepped()
            flag = MoveFlag.DOUBLE_PAWN
        elif victim_sq is not None:
            flag = MoveFlag.EN_PASSANT
        board[target] = placed

        record = MoveRecord(
            color=piece.color,
            piece=piece,
            from_sq=from_sq,
            to_sq=target,
            turn_number=st.turn_number,
            flag=flag,
            captured=captured.decayed() if captured is not None else None,
        )
        _LOGGER.debug(
            "Turn %d: %s %s %s-%s%s",
            st.turn_number,
            piece.color,
            piece.piece_type.name.lower(),
            square_name(from_sq),
            square_name(target),
            " (capture)" if captured is not None else "",
        )

        if piece.piece_type == PieceType.PAWN and target[1] == promotion_rank(
            piece.color
        ):
            return self._request_promotion(record)
        return self._complete_turn(record)

    def _request_promotion(self, record: MoveRecord) -> CommandResult:
        st = self._state
        st.selection = None
        st.pending_promotion = record.to_sq
        st.pending_record = record
        st.refresh_check_flags()
        self._set_phase(TurnPhase.PROMOTION_PENDING)
        for cb in self.events.on_promotion_requested:
            cb(record.color, record.to_sq)

        if self._chooser is None:
            return CommandResult(True, record=record)

        choice = self._chooser.choose(record.color, record.to_sq)
        result = self.resolve_promotion(choice)
        if not result:
            _LOGGER.warning(
                "Promotion chooser returned %r; awaiting resolve_promotion()", choice
            )
            return CommandResult(True, record=record)
        return result

    def _complete_turn(self, record: MoveRecord) -> CommandResult:
        st = self._state
        st.selection = None
        st.pending_promotion = None
        st.pending_record = None
        st.last_move = record
        st.refresh_check_flags()
        st.flip_turn()
        self._set_phase(TurnPhase.AWAITING_SELECTION)
        for cb in self.events.on_move:
            cb(record, st)
        return CommandResult(True, record=record)

    def _reject(self, command: str, reason: RejectReason) -> CommandResult:
        _LOGGER.debug("Rejected %s: %s", command, reason.value)
        for cb in self.events.on_rejected:
            cb(command, reason)
        return CommandResult(False, reason=reason)

    def _set_phase(self, phase: TurnPhase) -> None:
        if self._state.phase == phase:
            return
        self._state.phase = phase
        self._emit_phase(phase)

    def _emit_phase(self, phase: TurnPhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
