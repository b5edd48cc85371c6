"""Move legality: can a piece relocate from one square to another."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece, is_friendly
from chessrules.core.types import Square, is_valid_square

if TYPE_CHECKING:
    from chessrules.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
_PAWN_PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}


def _pawn_start_rank(color: Color) -> int:
    return _PAWN_START_RANK[color]


def promotion_rank(color: Color) -> int:
    """The rank farthest from *color*'s pawns' start."""
    return _PAWN_PROMOTION_RANK[color]


# -- Geometry helpers --------------------------------------------------------


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def slide_direction(from_sq: Square, to_sq: Square) -> tuple[int, int] | None:
    """Unit step from *from_sq* toward *to_sq* along a line or diagonal.

    ``None`` when the squares are equal or not aligned.
    """
    dfile = to_sq[0] - from_sq[0]
    drank = to_sq[1] - from_sq[1]
    if dfile == 0 and drank == 0:
        return None
    if dfile != 0 and drank != 0 and abs(dfile) != abs(drank):
        return None
    return (_sign(dfile), _sign(drank))


def ray_is_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Cast a ray from *from_sq* and report whether it reaches *to_sq*.

    The scan stops at the first occupied square.  *to_sq* is reached when it
    lies within the empty run or is the stopping square itself; whether the
    stopping square may be entered is the caller's friendly-target check.
    """
    direction = slide_direction(from_sq, to_sq)
    if direction is None:
        return False
    df, dr = direction
    file, rank = from_sq[0] + df, from_sq[1] + dr
    while board.in_bounds(file, rank):
        if (file, rank) == to_sq:
            return True
        if board.get(file, rank) is not None:
            return False
        file += df
        rank += dr
    return False


def _slides(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    directions: tuple[tuple[int, int], ...],
) -> bool:
    direction = slide_direction(from_sq, to_sq)
    return direction in directions and ray_is_clear(board, from_sq, to_sq)


def knight_reaches(from_sq: Square, to_sq: Square) -> bool:
    offset = (to_sq[0] - from_sq[0], to_sq[1] - from_sq[1])
    return offset in KNIGHT_OFFSETS


def king_reaches(from_sq: Square, to_sq: Square) -> bool:
    offset = (to_sq[0] - from_sq[0], to_sq[1] - from_sq[1])
    return offset in KING_OFFSETS


_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}


def reaches(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """Pure geometry for every kind except the pawn.

    Shared by move and attack legality: knights, sliders and kings threaten
    exactly the squares they can move to.
    """
    ptype = piece.piece_type
    if ptype == PieceType.KNIGHT:
        return knight_reaches(from_sq, to_sq)
    if ptype == PieceType.KING:
        return king_reaches(from_sq, to_sq)
    directions = _SLIDER_DIRS.get(ptype)
    if directions is None:
        return False
    return _slides(board, from_sq, to_sq, directions)


# -- Pawn pushes --------------------------------------------------------------


def pawn_push_distance(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square
) -> int:
    """1 or 2 for a legal forward push onto empty squares, else 0."""
    if to_sq[0] != from_sq[0]:
        return 0
    step = piece.color.forward
    drank = to_sq[1] - from_sq[1]
    if drank == step:
        return 1 if board.is_empty(to_sq) else 0
    if drank == 2 * step and from_sq[1] == _pawn_start_rank(piece.color):
        between = (from_sq[0], from_sq[1] + step)
        if board.is_empty(between) and board.is_empty(to_sq):
            return 2
    return 0


def is_double_step(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square
) -> bool:
    return (
        piece.piece_type == PieceType.PAWN
        and pawn_push_distance(board, piece, from_sq, to_sq) == 2
    )


# -- Public API --------------------------------------------------------------


def can_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """Can *piece* standing on *from_sq* relocate to *to_sq*?

    Pawns only push forward here; their diagonal captures belong to
    :func:`chessrules.core.attack_rules.can_attack`.  A king move is also
    rejected when it would leave that king attacked.
    """
    if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
        return False
    if is_friendly(piece, board[to_sq]):
        return False

    if piece.piece_type == PieceType.PAWN:
        return pawn_push_distance(board, piece, from_sq, to_sq) > 0

    if not reaches(board, piece, from_sq, to_sq):
        return False

    if piece.piece_type == PieceType.KING:
        from chessrules.core.check import would_be_in_check

        return not would_be_in_check(board, piece, from_sq, to_sq, piece.color)
    return True
