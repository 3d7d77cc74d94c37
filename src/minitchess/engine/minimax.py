"""Pure-Python MinitChess search (minimax + alpha-beta).

The variant's win conditions break the usual terminal-state assumptions,
so the root short-circuits two instant wins before searching: capturing
the enemy king, and leaving the enemy without a legal move.
"""

from __future__ import annotations

import logging

from minitchess.core.board import Board
from minitchess.core.enums import Color, PieceType
from minitchess.core.move import Move
from minitchess.core.move_generator import MoveGenerator, generate_all_moves
from minitchess.core.notation import to_notation
from minitchess.core.piece import Piece
from minitchess.core.types import ALL_SQUARES, ROWS, Square
from minitchess.engine.search import (
    DEFAULT_CONFIG,
    SOURCE_KING_CAPTURE,
    SOURCE_NONE,
    SOURCE_OPENING,
    SOURCE_SEARCH,
    SOURCE_STALEMATE_WIN,
    IEngine,
    SearchConfig,
    SearchResult,
)
from minitchess.engine.tables import KING_ORDER_VALUE

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = float("inf")
_WIN_SCORE = 100_000
_PROMOTION_ORDER_BONUS = 800
_CENTER_ORDER_WEIGHT = 10
_MOBILITY_WEIGHT = 5
_KING_CENTER_WEIGHT = 5
_KING_ATTACK_WEIGHT = 50
_CENTER_COL = 2
_CENTER_ROW = 2.5


def _center_distance(sq: Square) -> float:
    return abs(sq.col - _CENTER_COL) + abs(sq.row - _CENTER_ROW)


class MinimaxEngine(IEngine):
    """Fixed-depth minimax searcher with root move ordering."""

    __slots__ = ("_config", "_nodes")

    def __init__(self, config: SearchConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._nodes = 0

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def nodes(self) -> int:
        """Nodes visited by the most recent search."""
        return self._nodes

    # -- Public API ---------------------------------------------------------

    def best_move(self, board: Board, color: Color, ply_count: int = 0) -> Move | None:
        """Move *color* should play, or ``None`` if it has no move at all."""
        return self.search(board, color, ply_count).best_move

    def search(
        self,
        board: Board,
        color: Color,
        ply_count: int = 0,
    ) -> SearchResult:
        self._nodes = 0
        depth = self._config.depth

        if ply_count < self._config.opening_ply_limit:
            book_move = self._opening_move(board, color)
            if book_move is not None:
                _LOGGER.debug("Opening move for %s: %s", color, to_notation(book_move))
                return SearchResult(book_move, 0, 0, 0, SOURCE_OPENING)

        moves = generate_all_moves(board, color)
        if not moves:
            _LOGGER.debug("No legal moves for %s", color)
            return SearchResult(None, -_WIN_SCORE, 0, 0, SOURCE_NONE)

        opponent = color.opposite
        best_move: Move | None = None
        best_score = -_INF_SCORE

        for move in self._order_moves(board, moves):
            target = board[move.to_sq]
            if target is not None and target.piece_type == PieceType.KING:
                _LOGGER.debug("King capture for %s: %s", color, to_notation(move))
                return SearchResult(move, _WIN_SCORE, 1, self._nodes, SOURCE_KING_CAPTURE)

            child = board.with_move(move.from_sq, move.to_sq)
            if not MoveGenerator(child).has_moves(opponent):
                _LOGGER.debug("Stalemate win for %s: %s", color, to_notation(move))
                return SearchResult(
                    move, _WIN_SCORE, 1, self._nodes, SOURCE_STALEMATE_WIN
                )

            score = self.minimax(
                child,
                depth - 1,
                -_INF_SCORE,
                _INF_SCORE,
                False,
                color,
                opponent,
            )
            # Strict comparison: ties keep the higher-priority move.
            if score > best_score:
                best_score = score
                best_move = move

        _LOGGER.debug(
            "Best move for %s: %s (score=%s, nodes=%d)",
            color,
            to_notation(best_move) if best_move is not None else "-",
            best_score,
            self._nodes,
        )
        return SearchResult(best_move, best_score, depth, self._nodes, SOURCE_SEARCH)

    def minimax(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        root_color: Color,
        side_to_move: Color,
    ) -> float:
        """Alpha-beta score of *board* from *root_color*'s point of view."""
        self._nodes += 1
        if depth <= 0:
            return self.evaluate(board, root_color)

        moves = generate_all_moves(board, side_to_move)
        # A stuck (or kingless) side to move has lost.
        if not moves or board.find_king(side_to_move) is None:
            return -_WIN_SCORE if maximizing else _WIN_SCORE

        next_side = side_to_move.opposite
        if maximizing:
            best = -_INF_SCORE
            for move in moves:
                child = board.with_move(move.from_sq, move.to_sq)
                score = self.minimax(
                    child, depth - 1, alpha, beta, False, root_color, next_side
                )
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return best

        best = _INF_SCORE
        for move in moves:
            child = board.with_move(move.from_sq, move.to_sq)
            score = self.minimax(
                child, depth - 1, alpha, beta, True, root_color, next_side
            )
            best = min(best, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return best

    def evaluate(self, board: Board, root_color: Color) -> float:
        """Static evaluation of *board* from *root_color*'s point of view."""
        opponent = root_color.opposite
        score = 0.0

        for sq in ALL_SQUARES:
            piece = board[sq]
            if piece is None:
                continue
            val = self._config.material.get(piece.piece_type, 0)
            val += self._piece_square_bonus(piece, sq)
            if piece.color == root_color:
                score += val
            else:
                score -= val

        gen = MoveGenerator(board)
        own_mobility = len(gen.generate_moves(root_color))
        their_mobility = len(gen.generate_moves(opponent))
        score += (own_mobility - their_mobility) * _MOBILITY_WEIGHT

        own_king = board.find_king(root_color)
        if own_king is not None:
            score -= _center_distance(own_king) * _KING_CENTER_WEIGHT

        their_king = board.find_king(opponent)
        if their_king is not None:
            score += gen.attackers_of(their_king, root_color) * _KING_ATTACK_WEIGHT

        return score

    # -- Helpers ------------------------------------------------------------

    def _opening_move(self, board: Board, color: Color) -> Move | None:
        gen = MoveGenerator(board)
        for entry in self._config.openings.get(color, ()):
            piece = board[entry.from_sq]
            if piece is None or piece.color != color:
                continue
            for move in gen.moves_from(entry.from_sq):
                if move.to_sq == entry.to_sq:
                    return move
        return None

    def _order_moves(self, board: Board, moves: list[Move]) -> list[Move]:
        return sorted(
            moves,
            key=lambda move: self._move_order_score(board, move),
            reverse=True,
        )

    def _move_order_score(self, board: Board, move: Move) -> float:
        score = 0.0

        # MVV-LVA: most valuable victim, least valuable attacker.
        target = board[move.to_sq]
        if target is not None:
            score += self._order_value(target.piece_type)
            score -= self._order_value(move.piece.piece_type) / 100

        if Board.is_promotion_rank(move.piece, move.to_sq.row):
            score += _PROMOTION_ORDER_BONUS

        score += (4 - _center_distance(move.to_sq)) * _CENTER_ORDER_WEIGHT
        return score

    def _order_value(self, piece_type: PieceType) -> int:
        if piece_type == PieceType.KING:
            return KING_ORDER_VALUE
        return self._config.material.get(piece_type, 0)

    def _piece_square_bonus(self, piece: Piece, sq: Square) -> int:
        table = self._config.piece_square_tables.get(piece.piece_type)
        if table is None:
            return 0
        row = sq.row if piece.color == Color.WHITE else ROWS - 1 - sq.row
        return table[row][sq.col]


def best_move(board: Board, color: Color, ply_count: int = 0) -> Move | None:
    """Best move for *color* using the default configuration."""
    return MinimaxEngine().best_move(board, color, ply_count)
