"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square, in_bounds, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces with a king-square cache.

    Reads of off-board coordinates return ``None`` ("no piece"); writes to
    them raise ``ValueError``.  The king cache is updated by every write, so
    it can never drift from the grid.
    """

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]

    @staticmethod
    def in_bounds(file: int, rank: int) -> bool:
        return in_bounds(file, rank)

    @staticmethod
    def _index(file: int, rank: int) -> int:
        return rank * BOARD_SIZE + file

    # -- Element access -----------------------------------------------------

    def get(self, file: int, rank: int) -> Piece | None:
        if not in_bounds(file, rank):
            return None
        return self._squares[self._index(file, rank)]

    def set(self, file: int, rank: int, piece: Piece | None) -> None:
        if not in_bounds(file, rank):
            raise ValueError(f"Square off the board: {(file, rank)!r}")
        idx = self._index(file, rank)
        old_piece = self._squares[idx]
        if old_piece is not None and old_piece.piece_type == PieceType.KING:
            if self._king_squares[int(old_piece.color)] == (file, rank):
                self._king_squares[int(old_piece.color)] = None

        self._squares[idx] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = (file, rank)

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.get(sq[0], sq[1])

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self.set(sq[0], sq[1], piece)

    def is_empty(self, sq: Square) -> bool:
        """True for an on-board square holding no piece."""
        return in_bounds(sq[0], sq[1]) and self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` for every occupied square, a1 first."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield (idx % BOARD_SIZE, idx // BOARD_SIZE), piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def has_king(self, color: Color) -> bool:
        return self._king_squares[int(color)] is not None

    def king_square(self, color: Color) -> Square:
        """Return the cached king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._king_squares = [None, None]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(BOARD_SIZE):
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self.get(file, rank)
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
