"""Attack legality: does a piece threaten a square.

Identical to move legality for every kind except the pawn, which attacks one
square diagonally forward and may strike an empty square only to capture en
passant.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.move_rules import reaches
from chessrules.core.piece import Piece, is_enemy, is_friendly
from chessrules.core.types import Square, is_valid_square

if TYPE_CHECKING:
    from chessrules.core.board import Board

_EN_PASSANT_RANK: dict[Color, int] = {Color.WHITE: 4, Color.BLACK: 3}


def en_passant_rank(color: Color) -> int:
    """The fifth rank as seen from *color*'s side."""
    return _EN_PASSANT_RANK[color]


def pawn_attacks(piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """Diagonal-forward geometry, regardless of occupancy."""
    return (
        abs(to_sq[0] - from_sq[0]) == 1
        and to_sq[1] - from_sq[1] == piece.color.forward
    )


def en_passant_victim(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square
) -> Square | None:
    """Square of the pawn an en-passant capture onto *to_sq* would remove.

    ``None`` unless *piece* is a pawn on its fifth rank, *to_sq* is an empty
    diagonal-forward square, and the enemy pawn beside it (one rank behind
    *to_sq*) is currently capturable en passant.
    """
    if piece.piece_type != PieceType.PAWN:
        return None
    if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
        return None
    if from_sq[1] != en_passant_rank(piece.color):
        return None
    if not pawn_attacks(piece, from_sq, to_sq) or not board.is_empty(to_sq):
        return None
    victim_sq = (to_sq[0], from_sq[1])
    victim = board[victim_sq]
    if (
        victim is None
        or victim.piece_type != PieceType.PAWN
        or victim.color == piece.color
        or not victim.en_passant_capturable
    ):
        return None
    return victim_sq


def is_en_passant_capture(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square
) -> bool:
    return en_passant_victim(board, piece, from_sq, to_sq) is not None


def can_attack(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """Does *piece* on *from_sq* threaten *to_sq*?

    Used for check detection and capture validation.  Kings attack by
    geometry alone; their own safety is the move rule's concern.
    """
    if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
        return False
    target = board[to_sq]
    if is_friendly(piece, target):
        return False

    if piece.piece_type == PieceType.PAWN:
        if is_enemy(piece, target):
            return pawn_attacks(piece, from_sq, to_sq)
        return is_en_passant_capture(board, piece, from_sq, to_sq)

    return reaches(board, piece, from_sq, to_sq)
