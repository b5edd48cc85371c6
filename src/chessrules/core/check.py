"""Check detection, passive (is a king attacked now) and active
(would a hypothetical move leave a king attacked).

Active checks simulate the move on the live board inside
:func:`simulated_move`, which restores every touched square on exit.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from chessrules.core.attack_rules import can_attack, en_passant_victim
from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_valid_square

if TYPE_CHECKING:
    from chessrules.core.board import Board


@contextmanager
def simulated_move(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square
) -> Iterator[Board]:
    """Temporarily play *piece* from *from_sq* to *to_sq*.

    An en-passant victim is lifted as well.  The original contents of every
    touched square are put back when the block exits, however it exits.
    """
    victim_sq = en_passant_victim(board, piece, from_sq, to_sq)
    saved: list[tuple[Square, Piece | None]] = [
        (from_sq, board[from_sq]),
        (to_sq, board[to_sq]),
    ]
    if victim_sq is not None:
        saved.append((victim_sq, board[victim_sq]))
    try:
        board[from_sq] = None
        if victim_sq is not None:
            board[victim_sq] = None
        board[to_sq] = piece
        yield board
    finally:
        for sq, original in reversed(saved):
            board[sq] = original


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    for from_sq, piece in board.occupied():
        if piece.color == by_color and can_attack(board, piece, from_sq, sq):
            return True
    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king (at its cached square) attacked by the opponent?"""
    return is_square_attacked(board, board.king_square(color), color.opposite)


def would_be_in_check(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square, color: Color
) -> bool:
    """Would *color*'s king be attacked after *piece* goes *from_sq* → *to_sq*?

    The board is identical before and after the call.
    """
    if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
        return False
    with simulated_move(board, piece, from_sq, to_sq):
        return is_in_check(board, color)


def resolves_check(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """Does the move leave the mover's king out of check?"""
    return not would_be_in_check(board, piece, from_sq, to_sq, piece.color)
