"""High-level rule queries used for highlighting and command validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.attack_rules import can_attack
from chessrules.core.castling import VARIANTS, can_castle, variant_for_target
from chessrules.core.check import is_in_check, would_be_in_check
from chessrules.core.enums import CastlingRights, CastlingSide, Color, PieceType
from chessrules.core.move_rules import can_move
from chessrules.core.piece import Piece
from chessrules.core.types import Square, all_squares, is_valid_square

if TYPE_CHECKING:
    from chessrules.core.board import Board


class Rules:
    """Static, side-effect-free rule checker over a :class:`Board`.

    Every query leaves the board exactly as it found it, so a presentation
    layer may call these at any time to glow legal targets, checks and
    castle hints.
    """

    @staticmethod
    def can_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        return can_move(board, piece, from_sq, to_sq)

    @staticmethod
    def can_attack(
        board: Board, piece: Piece, from_sq: Square, to_sq: Square
    ) -> bool:
        return can_attack(board, piece, from_sq, to_sq)

    @staticmethod
    def can_castle(
        board: Board, rights: CastlingRights, color: Color, side: CastlingSide
    ) -> bool:
        return can_castle(board, rights, color, side)

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return is_in_check(board, color)

    @staticmethod
    def is_legal_drop(
        board: Board, piece: Piece, from_sq: Square, to_sq: Square
    ) -> bool:
        """Move or attack legal, and the mover's king stays safe."""
        if not (
            can_move(board, piece, from_sq, to_sq)
            or can_attack(board, piece, from_sq, to_sq)
        ):
            return False
        return not would_be_in_check(board, piece, from_sq, to_sq, piece.color)

    @staticmethod
    def legal_targets(board: Board, sq: Square) -> list[Square]:
        """Every square the piece on *sq* may be dropped on."""
        piece = board[sq] if is_valid_square(sq) else None
        if piece is None:
            return []
        return [
            to_sq
            for to_sq in all_squares()
            if to_sq != sq and Rules.is_legal_drop(board, piece, sq, to_sq)
        ]

    @staticmethod
    def castle_targets(
        board: Board, rights: CastlingRights, sq: Square
    ) -> list[Square]:
        """Castle targets offered to the king or rook on *sq*."""
        piece = board[sq] if is_valid_square(sq) else None
        if piece is None or piece.piece_type not in (PieceType.KING, PieceType.ROOK):
            return []
        targets: list[Square] = []
        for side in CastlingSide:
            v = VARIANTS[(piece.color, side)]
            target = v.king_to if piece.piece_type == PieceType.KING else v.rook_to
            if variant_for_target(piece, sq, target) is None:
                continue
            if can_castle(board, rights, piece.color, side):
                targets.append(target)
        return targets
