"""MinitChess: rules and search AI for 5x6 chess without check.

Functional surface used by the turn controller and renderer::

    from minitchess import Color, apply_move, best_move, create_board

    board = create_board()
    move = best_move(board, Color.WHITE, 0)
    result = apply_move(board, move.from_sq, move.to_sq)
"""

from minitchess.core import (
    Board,
    Color,
    Move,
    MoveResult,
    Piece,
    PieceType,
    Square,
    create_board,
    execute_move,
    generate_all_moves,
    has_legal_moves,
    legal_moves,
    parse_square,
    to_notation,
)
from minitchess.engine import best_move

apply_move = execute_move
all_legal_moves = generate_all_moves

__all__ = [
    "Board",
    "Color",
    "Move",
    "MoveResult",
    "Piece",
    "PieceType",
    "Square",
    "all_legal_moves",
    "apply_move",
    "best_move",
    "create_board",
    "has_legal_moves",
    "legal_moves",
    "parse_square",
    "to_notation",
]
