"""Board cursor driven by navigation intents."""

from __future__ import annotations

from chessrules.core.types import BOARD_SIZE, E1, Square, is_valid_square


class Cursor:
    """Square under the presentation layer's cursor.

    Moving past an edge wraps to the opposite edge unless wrapping is off,
    in which case the cursor stops at the edge.
    """

    __slots__ = ("_square", "_wrap")

    def __init__(self, start: Square = E1, wrap: bool = True) -> None:
        if not is_valid_square(start):
            raise ValueError(f"Cursor start off the board: {start!r}")
        self._square = start
        self._wrap = wrap

    @property
    def square(self) -> Square:
        return self._square

    @property
    def wraps(self) -> bool:
        return self._wrap

    def move(self, dfile: int, drank: int) -> Square:
        file = self._square[0] + dfile
        rank = self._square[1] + drank
        if self._wrap:
            file %= BOARD_SIZE
            rank %= BOARD_SIZE
        else:
            file = min(max(file, 0), BOARD_SIZE - 1)
            rank = min(max(rank, 0), BOARD_SIZE - 1)
        self._square = (file, rank)
        return self._square

    def move_to(self, sq: Square) -> None:
        if not is_valid_square(sq):
            raise ValueError(f"Cursor target off the board: {sq!r}")
        self._square = sq

    def __repr__(self) -> str:
        return f"Cursor({self._square!r}, wrap={self._wrap})"
