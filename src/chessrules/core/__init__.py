"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Rules, parse_square

    board = Board.initial()
    e2 = parse_square("e2")
    print(Rules.legal_targets(board, e2))
"""

from chessrules.core.attack_rules import can_attack, is_en_passant_capture
from chessrules.core.board import Board
from chessrules.core.castling import CastlingVariant, can_castle
from chessrules.core.check import (
    is_in_check,
    is_square_attacked,
    resolves_check,
    simulated_move,
    would_be_in_check,
)
from chessrules.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    CastlingSide,
    Color,
    MoveFlag,
    PieceType,
)
from chessrules.core.move_rules import can_move
from chessrules.core.notation import (
    STARTING_PLACEMENT,
    placement_from_text,
    placement_to_text,
)
from chessrules.core.piece import Piece, belongs_to, is_enemy, is_friendly
from chessrules.core.rules import Rules
from chessrules.core.types import (
    Square,
    file_of,
    in_bounds,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "CastlingSide",
    "Color",
    "MoveFlag",
    "PieceType",
    "PROMOTION_TYPES",
    # Types / helpers
    "Square",
    "file_of",
    "in_bounds",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "CastlingVariant",
    "Piece",
    "Rules",
    # Classifier
    "belongs_to",
    "is_enemy",
    "is_friendly",
    # Legality
    "can_attack",
    "can_castle",
    "can_move",
    "is_en_passant_capture",
    "is_in_check",
    "is_square_attacked",
    "resolves_check",
    "simulated_move",
    "would_be_in_check",
    # Placement text
    "STARTING_PLACEMENT",
    "placement_from_text",
    "placement_to_text",
]
