"""Core domain layer — pure MinitChess rules with zero external dependencies.

Quick start::

    from minitchess.core import Color, MoveGenerator, create_board, to_notation

    board = create_board()
    for move in MoveGenerator(board).generate_moves(Color.WHITE):
        print(to_notation(move))
"""

from minitchess.core.board import Board, create_board
from minitchess.core.enums import Color, EndReason, GameResult, PieceType
from minitchess.core.move import Move, MoveResult
from minitchess.core.move_generator import (
    MoveGenerator,
    execute_move,
    execute_promotion,
    generate_all_moves,
    has_legal_moves,
    is_legal_move,
    legal_moves,
)
from minitchess.core.notation import (
    STARTING_LAYOUT,
    board_from_layout,
    board_to_layout,
    to_notation,
)
from minitchess.core.piece import (
    Piece,
    color_of,
    material_value,
    promotion_choices,
    type_of,
)
from minitchess.core.rules import MOVE_LIMIT, Rules
from minitchess.core.types import (
    Square,
    is_valid_square,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "EndReason",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Rules",
    "MOVE_LIMIT",
    # Piece codec
    "color_of",
    "material_value",
    "promotion_choices",
    "type_of",
    # Move generation
    "create_board",
    "execute_move",
    "execute_promotion",
    "generate_all_moves",
    "has_legal_moves",
    "is_legal_move",
    "legal_moves",
    # Notation
    "STARTING_LAYOUT",
    "board_from_layout",
    "board_to_layout",
    "to_notation",
]
