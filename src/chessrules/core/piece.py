"""Piece value object and classifier helpers."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessrules.core.enums import Color, PieceType

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece on the board.

    The two pawn flags carry the en-passant lifecycle:

    * ``just_double_stepped``: the pawn advanced two squares on the ply
      that was just played.
    * ``en_passant_capturable``: an enemy pawn may capture it en passant
      on the immediately following ply.

    Both are set together by a double step and both are cleared when the
    opponent's next ply starts, so they never outlive one ply.
    """

    color: Color
    piece_type: PieceType
    just_double_stepped: bool = False
    en_passant_capturable: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    # ── Special markers ──────────────────────────────────────────────────

    @property
    def is_marked(self) -> bool:
        return self.just_double_stepped or self.en_passant_capturable

    def double_stepped(self) -> Piece:
        """This pawn as it stands right after a two-square advance."""
        return replace(self, just_double_stepped=True, en_passant_capturable=True)

    def decayed(self) -> Piece:
        """What the piece becomes once its special markers expire."""
        if not self.is_marked:
            return self
        return replace(self, just_double_stepped=False, en_passant_capturable=False)

    def promoted(self, piece_type: PieceType) -> Piece:
        return Piece(self.color, piece_type)


# ── Classifier ──────────────────────────────────────────────────────────────


def belongs_to(piece: Piece | None, color: Color) -> bool:
    """Whether *piece* exists and is *color*'s."""
    return piece is not None and piece.color == color


def is_friendly(piece: Piece, other: Piece | None) -> bool:
    return other is not None and other.color == piece.color


def is_enemy(piece: Piece, other: Piece | None) -> bool:
    """Whether *other* is a piece *piece* may capture."""
    return other is not None and other.color != piece.color
