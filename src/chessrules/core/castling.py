"""Castling validation and the compound king + rook relocation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.check import is_in_check, would_be_in_check
from chessrules.core.enums import CastlingRights, CastlingSide, Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, make_square

if TYPE_CHECKING:
    from chessrules.core.board import Board


@dataclass(frozen=True, slots=True)
class CastlingVariant:
    """Fixed geometry of one of the four castles."""

    color: Color
    side: CastlingSide
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    # Squares strictly between king and rook; all must be empty.
    corridor: tuple[Square, ...]
    # Squares the king passes through, destination included.
    king_path: tuple[Square, ...]

    @property
    def right(self) -> CastlingRights:
        return CastlingRights.for_side(self.color, self.side)


def _variant(color: Color, side: CastlingSide) -> CastlingVariant:
    rank = 0 if color == Color.WHITE else 7
    if side == CastlingSide.KINGSIDE:
        return CastlingVariant(
            color=color,
            side=side,
            king_from=make_square(4, rank),
            king_to=make_square(6, rank),
            rook_from=make_square(7, rank),
            rook_to=make_square(5, rank),
            corridor=(make_square(5, rank), make_square(6, rank)),
            king_path=(make_square(5, rank), make_square(6, rank)),
        )
    return CastlingVariant(
        color=color,
        side=side,
        king_from=make_square(4, rank),
        king_to=make_square(2, rank),
        rook_from=make_square(0, rank),
        rook_to=make_square(3, rank),
        corridor=(make_square(1, rank), make_square(2, rank), make_square(3, rank)),
        king_path=(make_square(3, rank), make_square(2, rank)),
    )


VARIANTS: dict[tuple[Color, CastlingSide], CastlingVariant] = {
    (color, side): _variant(color, side) for color in Color for side in CastlingSide
}

# Home squares whose vacating (or capture) revokes a right.
HOME_SQUARE_RIGHTS: dict[Square, CastlingRights] = {
    make_square(4, 0): CastlingRights.WHITE_BOTH,
    make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
    make_square(4, 7): CastlingRights.BLACK_BOTH,
    make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
    make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
}


def variant(color: Color, side: CastlingSide) -> CastlingVariant:
    return VARIANTS[(color, side)]


def can_castle(
    board: Board, rights: CastlingRights, color: Color, side: CastlingSide
) -> bool:
    """Is *color*'s *side* castle legal right now?

    In order: the right is unrevoked, king and rook stand on their home
    squares, the corridor is empty, the king is not in check, and the king
    is not attacked on any square it passes through or lands on.  Transit
    squares are probed with a simulated king move, never a permanent one.
    """
    v = VARIANTS[(color, side)]
    if not rights & v.right:
        return False

    king = Piece(color, PieceType.KING)
    rook = board[v.rook_from]
    if board[v.king_from] != king:
        return False
    if rook is None or rook.color != color or rook.piece_type != PieceType.ROOK:
        return False

    if any(not board.is_empty(sq) for sq in v.corridor):
        return False
    if is_in_check(board, color):
        return False
    for sq in v.king_path:
        if would_be_in_check(board, king, v.king_from, sq, color):
            return False
    return True


def variant_for_target(
    piece: Piece, from_sq: Square, target: Square
) -> CastlingVariant | None:
    """Which castle a selected king or rook plus a target square asks for.

    A king names the castle by its landing square; a rook by standing on its
    home corner and naming its own landing square.
    """
    for side in CastlingSide:
        v = VARIANTS[(piece.color, side)]
        if piece.piece_type == PieceType.KING:
            if from_sq == v.king_from and target == v.king_to:
                return v
        elif piece.piece_type == PieceType.ROOK:
            if from_sq == v.rook_from and target == v.rook_to:
                return v
    return None


def apply_castle(board: Board, v: CastlingVariant) -> None:
    """Relocate king and rook together; no legality checks."""
    king = board[v.king_from]
    rook = board[v.rook_from]
    board[v.king_from] = None
    board[v.rook_from] = None
    board[v.king_to] = king
    board[v.rook_to] = rook


def revoked_rights(rights: CastlingRights, *squares: Square) -> CastlingRights:
    """*rights* minus anything tied to a home square among *squares*."""
    for sq in squares:
        lost = HOME_SQUARE_RIGHTS.get(sq)
        if lost is not None:
            rights &= ~lost
    return rights
