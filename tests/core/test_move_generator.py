"""Tests for piece movement rules and move aggregation."""

import pytest

from minitchess.core.board import Board
from minitchess.core.enums import Color, PieceType
from minitchess.core.move import Move
from minitchess.core.move_generator import (
    MoveGenerator,
    execute_move,
    execute_promotion,
    generate_all_moves,
    has_legal_moves,
    is_legal_move,
    legal_moves,
)
from minitchess.core.notation import board_from_layout
from minitchess.core.piece import Piece
from minitchess.core.types import ALL_SQUARES, Square


def _destinations(moves: list[Move]) -> set[Square]:
    return {move.to_sq for move in moves}


def _captures(moves: list[Move]) -> set[Square]:
    return {move.to_sq for move in moves if move.is_capture}


def _lone(piece_char: str, sq: Square) -> Board:
    return Board().set(sq.row, sq.col, Piece.from_char(piece_char))


C3 = Square(2, 2)

DIAGONALS_FROM_C3 = {
    Square(3, 3), Square(4, 4),
    Square(3, 1), Square(4, 0),
    Square(1, 3), Square(0, 4),
    Square(1, 1), Square(0, 0),
}
ORTHOGONAL_STEPS_FROM_C3 = {Square(2, 3), Square(2, 1), Square(3, 2), Square(1, 2)}
ROOK_RAYS_FROM_C3 = {
    Square(2, 3), Square(2, 4), Square(2, 1), Square(2, 0),
    Square(3, 2), Square(4, 2), Square(5, 2), Square(1, 2), Square(0, 2),
}


class TestKing:
    def test_corner_king(self) -> None:
        moves = legal_moves(_lone("K", Square(0, 0)), Square(0, 0))
        assert _destinations(moves) == {Square(0, 1), Square(1, 0), Square(1, 1)}

    def test_blocked_by_own_and_captures_enemy(self) -> None:
        board = board_from_layout("5/5/5/5/p4/KN3")
        moves = legal_moves(board, Square(0, 0))
        assert _destinations(moves) == {Square(1, 0), Square(1, 1)}
        assert _captures(moves) == {Square(1, 0)}


class TestKnight:
    def test_corner_knight(self) -> None:
        moves = legal_moves(_lone("N", Square(0, 0)), Square(0, 0))
        assert _destinations(moves) == {Square(2, 1), Square(1, 2)}

    def test_starting_knight_jumps_over_pawns(self, initial_board: Board) -> None:
        moves = legal_moves(initial_board, Square(0, 1))
        assert _destinations(moves) == {Square(2, 0), Square(2, 2)}


class TestRook:
    def test_open_board(self) -> None:
        moves = legal_moves(_lone("R", C3), C3)
        assert _destinations(moves) == ROOK_RAYS_FROM_C3

    def test_stops_on_enemy_and_before_own(self) -> None:
        board = board_from_layout("5/5/p4/5/P4/R4")
        moves = legal_moves(board, Square(0, 0))
        assert _destinations(moves) == {
            Square(0, 1), Square(0, 2), Square(0, 3), Square(0, 4),
        }
        board = board_from_layout("5/5/p4/5/5/R4")
        moves = legal_moves(board, Square(0, 0))
        assert {Square(1, 0), Square(2, 0), Square(3, 0)} <= _destinations(moves)
        assert Square(4, 0) not in _destinations(moves)
        assert _captures(moves) == {Square(3, 0)}


class TestBishop:
    def test_diagonals_plus_orthogonal_steps(self) -> None:
        moves = legal_moves(_lone("B", C3), C3)
        assert _destinations(moves) == DIAGONALS_FROM_C3 | ORTHOGONAL_STEPS_FROM_C3
        assert len(moves) == 12

    def test_orthogonal_step_does_not_slide(self) -> None:
        dests = _destinations(legal_moves(_lone("B", C3), C3))
        assert Square(2, 4) not in dests
        assert Square(4, 2) not in dests
        assert Square(0, 2) not in dests

    def test_blocking_and_captures(self) -> None:
        # Own pawn d4 and knight d3, enemy pawns c4 and b2.
        board = board_from_layout("5/5/2pP1/2BN1/1p3/5")
        moves = legal_moves(board, C3)
        assert _destinations(moves) == {
            Square(3, 1), Square(4, 0),
            Square(1, 3), Square(0, 4),
            Square(1, 1),
            Square(2, 1), Square(3, 2), Square(1, 2),
        }
        assert _captures(moves) == {Square(1, 1), Square(3, 2)}

    def test_starting_bishop_is_boxed_in(self, initial_board: Board) -> None:
        assert legal_moves(initial_board, Square(0, 2)) == []


class TestQueen:
    def test_rook_rays_plus_plain_diagonals(self) -> None:
        moves = legal_moves(_lone("Q", C3), C3)
        assert _destinations(moves) == ROOK_RAYS_FROM_C3 | DIAGONALS_FROM_C3
        assert len(moves) == 17

    def test_blocked_orthogonals_leave_only_diagonals(self) -> None:
        # Every orthogonal neighbour holds an own piece, leaving only diagonals.
        board = board_from_layout("5/5/2P2/1PQP1/2P2/5")
        queen_moves = legal_moves(board, C3)
        assert _destinations(queen_moves) == DIAGONALS_FROM_C3

    def test_matches_rook_and_plain_diagonal_union(self) -> None:
        layout = "1p3/5/2Pp1/p1Q2/1P2n/5"
        board = board_from_layout(layout)
        rook_board = board.set(2, 2, Piece(Color.WHITE, PieceType.ROOK))
        bishop_board = board.set(2, 2, Piece(Color.WHITE, PieceType.BISHOP))

        rook = _destinations(legal_moves(rook_board, C3))
        bishop = _destinations(legal_moves(bishop_board, C3))
        diagonal_only = {sq for sq in bishop if sq.row != 2 and sq.col != 2}
        queen = _destinations(legal_moves(board, C3))

        assert queen == rook | diagonal_only

    def test_starting_queen_is_boxed_in(self, initial_board: Board) -> None:
        assert legal_moves(initial_board, Square(0, 3)) == []


class TestPawn:
    def test_white_single_and_double_step(self, initial_board: Board) -> None:
        moves = legal_moves(initial_board, Square(1, 2))
        assert _destinations(moves) == {Square(2, 2), Square(3, 2)}

    def test_black_single_and_double_step(self, initial_board: Board) -> None:
        moves = legal_moves(initial_board, Square(4, 2))
        assert _destinations(moves) == {Square(3, 2), Square(2, 2)}

    def test_double_step_needs_empty_intermediate(self) -> None:
        board = board_from_layout("5/5/5/2n2/2P2/5")
        assert legal_moves(board, Square(1, 2)) == []

    def test_double_step_needs_empty_destination(self) -> None:
        board = board_from_layout("5/5/2n2/5/2P2/5")
        assert _destinations(legal_moves(board, Square(1, 2))) == {Square(2, 2)}

    def test_no_double_step_off_start_row(self) -> None:
        board = board_from_layout("5/5/5/2P2/5/5")
        assert _destinations(legal_moves(board, C3)) == {Square(3, 2)}

    def test_diagonal_captures_only_enemies(self) -> None:
        board = board_from_layout("5/5/5/1n1B1/2P2/5")
        moves = legal_moves(board, Square(1, 2))
        assert _destinations(moves) == {Square(2, 2), Square(3, 2), Square(2, 1)}
        assert _captures(moves) == {Square(2, 1)}

    def test_black_captures_downward(self) -> None:
        board = board_from_layout("5/2p2/1N1R1/5/5/5")
        moves = legal_moves(board, Square(4, 2))
        assert _captures(moves) == {Square(3, 1), Square(3, 3)}

    def test_pawn_on_last_rank_is_stuck(self) -> None:
        board = board_from_layout("2P2/5/5/5/5/5")
        assert legal_moves(board, Square(5, 2)) == []


class TestAggregation:
    @pytest.mark.parametrize("color", list(Color))
    def test_starting_move_count(self, initial_board: Board, color: Color) -> None:
        # 5 pawns x 2 steps + 2 knight jumps; everything else is boxed in.
        assert len(generate_all_moves(initial_board, color)) == 12

    def test_moves_are_tagged_with_origin(self, initial_board: Board) -> None:
        for color in Color:
            for move in generate_all_moves(initial_board, color):
                assert initial_board[move.from_sq] == move.piece
                assert move.piece.color == color

    def test_empty_and_off_board_squares_have_no_moves(
        self, initial_board: Board
    ) -> None:
        assert legal_moves(initial_board, Square(2, 2)) == []
        assert legal_moves(initial_board, Square(7, 7)) == []

    def test_has_legal_moves_agrees_with_generation(
        self, initial_board: Board, stalemate_win_board: Board
    ) -> None:
        after = execute_move(stalemate_win_board, Square(0, 4), Square(1, 3)).board
        boards = [initial_board, stalemate_win_board, after, Board()]
        for board in boards:
            for color in Color:
                assert has_legal_moves(board, color) == bool(
                    generate_all_moves(board, color)
                )
        assert not has_legal_moves(after, Color.BLACK)

    def test_single_white_move_in_stalemate_fixture(
        self, stalemate_win_board: Board
    ) -> None:
        moves = generate_all_moves(stalemate_win_board, Color.WHITE)
        assert [(m.from_sq, m.to_sq, m.is_capture) for m in moves] == [
            (Square(0, 4), Square(1, 3), True)
        ]

    def test_attackers_of(self) -> None:
        board = board_from_layout("4k/5/5/5/5/K3R")
        gen = MoveGenerator(board)
        assert gen.attackers_of(Square(5, 4), Color.WHITE) == 1
        assert gen.attackers_of(Square(0, 0), Color.BLACK) == 0

    def test_generation_never_mutates_board(self, initial_board: Board) -> None:
        snapshot = [initial_board[sq] for sq in ALL_SQUARES]
        generate_all_moves(initial_board, Color.WHITE)
        assert [initial_board[sq] for sq in ALL_SQUARES] == snapshot

    def test_is_legal_move(self, initial_board: Board) -> None:
        assert is_legal_move(initial_board, Square(1, 2), Square(3, 2))
        assert not is_legal_move(initial_board, Square(1, 2), Square(4, 2))


class TestExecuteMove:
    def test_returns_new_board(self, initial_board: Board) -> None:
        result = execute_move(initial_board, Square(1, 2), Square(3, 2))
        assert result.board.get(3, 2) == Piece(Color.WHITE, PieceType.PAWN)
        assert result.board.get(1, 2) is None
        assert initial_board.get(1, 2) == Piece(Color.WHITE, PieceType.PAWN)
        assert result.captured_piece is None
        assert not result.is_promotion
        assert not result.captured_king

    def test_capture_reports_piece(self) -> None:
        board = board_from_layout("5/5/2r2/2Q2/5/5")
        result = execute_move(board, C3, Square(3, 2))
        assert result.captured_piece == Piece(Color.BLACK, PieceType.ROOK)
        assert not result.captured_king

    def test_king_capture_is_flagged(self) -> None:
        board = board_from_layout("5/5/2k2/2Q2/5/5")
        result = execute_move(board, C3, Square(3, 2))
        assert result.captured_piece == Piece(Color.BLACK, PieceType.KING)
        assert result.captured_king
        assert result.board.find_king(Color.BLACK) is None
        assert board.find_king(Color.BLACK) == Square(3, 2)

    def test_white_pawn_promotes_on_row_five(self) -> None:
        board = board_from_layout("5/3P1/5/5/5/5")
        assert execute_move(board, Square(4, 3), Square(5, 3)).is_promotion

    def test_black_pawn_promotes_on_row_zero(self) -> None:
        board = board_from_layout("5/5/5/5/1p3/5")
        assert execute_move(board, Square(1, 1), Square(0, 1)).is_promotion

    def test_other_destinations_do_not_promote(self, initial_board: Board) -> None:
        assert not execute_move(initial_board, Square(1, 0), Square(2, 0)).is_promotion
        assert not execute_move(initial_board, Square(4, 0), Square(3, 0)).is_promotion
        rook_board = board_from_layout("5/R4/5/5/5/5")
        assert not execute_move(rook_board, Square(4, 0), Square(5, 0)).is_promotion
        # A black pawn reaching White's promotion row is not a promotion.
        odd = board_from_layout("5/p4/5/5/5/5")
        assert not execute_move(odd, Square(4, 0), Square(5, 0)).is_promotion


class TestExecutePromotion:
    def test_replaces_pawn(self) -> None:
        board = board_from_layout("3P1/5/5/5/5/5")
        promoted = execute_promotion(board, Square(5, 3), PieceType.KNIGHT)
        assert promoted.get(5, 3) == Piece(Color.WHITE, PieceType.KNIGHT)
        assert board.get(5, 3) == Piece(Color.WHITE, PieceType.PAWN)

    def test_keeps_pawn_color(self) -> None:
        board = board_from_layout("5/5/5/5/5/1p3")
        promoted = execute_promotion(board, Square(0, 1), PieceType.ROOK)
        assert promoted.get(0, 1) == Piece(Color.BLACK, PieceType.ROOK)

    @pytest.mark.parametrize("piece_type", [PieceType.QUEEN, PieceType.KING])
    def test_rejects_queen_and_king(self, piece_type: PieceType) -> None:
        board = board_from_layout("3P1/5/5/5/5/5")
        with pytest.raises(ValueError, match="Cannot promote"):
            execute_promotion(board, Square(5, 3), piece_type)

    def test_rejects_non_pawn(self) -> None:
        board = board_from_layout("3R1/5/5/5/5/5")
        with pytest.raises(ValueError, match="No pawn"):
            execute_promotion(board, Square(5, 3), PieceType.BISHOP)
