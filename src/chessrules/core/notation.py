"""FEN piece-placement text ↔ :class:`Board`.

Only the placement field is handled; side to move, castling rights and the
pawn flags live in the game state, not in this text.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, make_square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def placement_from_text(text: str) -> Board:
    """Parse a FEN placement field (the first FEN field also works)."""
    fields = text.split()
    if not fields:
        raise ValueError(f"Empty placement: {text!r}")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {text!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - 1 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {text!r}")
                file += step
            else:
                if file >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {text!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {text!r}")
        if file != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {text!r}")
    return board


def placement_to_text(board: Board) -> str:
    """Serialise *board* as a FEN placement field (pawn flags are dropped)."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        row = ""
        empty = 0
        for file in range(BOARD_SIZE):
            piece = board.get(file, rank)
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
