"""High-level MinitChess rules: king capture, stalemate-win, move limit."""

from __future__ import annotations

from minitchess.core.board import Board
from minitchess.core.enums import Color, EndReason, GameResult
from minitchess.core.move_generator import has_legal_moves

# Total moves after which an undecided game is drawn.
MOVE_LIMIT = 40


def _win_for(color: Color) -> GameResult:
    return GameResult.WHITE_WINS if color == Color.WHITE else GameResult.BLACK_WINS


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - No check or checkmate; capturing the king wins.
    # - A side left without moves has LOST (stalemate-win for the mover).

    @staticmethod
    def is_king_captured(board: Board, color: Color) -> bool:
        return board.find_king(color) is None

    @staticmethod
    def is_stalemate_win(board: Board, side_to_move: Color) -> bool:
        """Whether *side_to_move* is stuck, handing the win to its opponent."""
        return not has_legal_moves(board, side_to_move)

    @staticmethod
    def is_move_limit_draw(move_count: int) -> bool:
        return move_count >= MOVE_LIMIT

    @staticmethod
    def game_result(
        board: Board,
        side_to_move: Color,
        move_count: int = 0,
    ) -> tuple[GameResult, EndReason]:
        """Determine the current game result and why."""
        for color in (side_to_move, side_to_move.opposite):
            if Rules.is_king_captured(board, color):
                return _win_for(color.opposite), EndReason.KING_CAPTURED

        if Rules.is_move_limit_draw(move_count):
            return GameResult.DRAW, EndReason.MOVE_LIMIT

        if Rules.is_stalemate_win(board, side_to_move):
            return _win_for(side_to_move.opposite), EndReason.STALEMATE

        return GameResult.IN_PROGRESS, EndReason.NONE
