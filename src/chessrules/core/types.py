"""Square type alias and coordinate helpers.

A square is a ``(file, rank)`` pair:
    file 0–7 → a–h
    rank 0–7 → 1–8

White starts on ranks 1–2 (indexes 0–1), Black on ranks 7–8 (indexes 6–7).
Nothing here raises for off-board coordinates except the name parser;
callers test :func:`in_bounds` and treat off-board as "no square".
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


def in_bounds(file: int, rank: int) -> bool:
    """Whether ``(file, rank)`` lies on the 8x8 grid."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def is_valid_square(sq: Square) -> bool:
    return in_bounds(sq[0], sq[1])


def make_square(file: int, rank: int) -> Square:
    return (file, rank)


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq[0]


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq[1]


def offset_square(sq: Square, dfile: int, drank: int) -> Square | None:
    """Square shifted by ``(dfile, drank)``, or ``None`` if it falls off-board."""
    file = sq[0] + dfile
    rank = sq[1] + drank
    if not in_bounds(file, rank):
        return None
    return (file, rank)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (4, 3) → 'e4'."""
    if not is_valid_square(sq):
        raise ValueError(f"Square off the board: {sq!r}")
    return _FILES[sq[0]] + _RANKS[sq[1]]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 3)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return (_FILES.index(name[0]), _RANKS.index(name[1]))


def all_squares() -> list[Square]:
    """Every square, a1 first, rank by rank."""
    return [(f, r) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ((f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = ((f, 7) for f in range(8))
