"""Pseudo-legal move generation for MinitChess.

There is no check in this variant: a king may step into attack and be
captured on the next move, so every pseudo-legal move is legal.
"""

from __future__ import annotations

from minitchess.core.board import Board
from minitchess.core.enums import Color, PieceType
from minitchess.core.move import Move, MoveResult
from minitchess.core.piece import PROMOTION_TYPES, Piece, are_enemies
from minitchess.core.types import ALL_SQUARES, Square, is_valid_square, make_square

# (d_row, d_col) offsets. Iteration order fixes the order moves are listed.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ORTHOGONAL_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
DIAGONAL_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        targets[sq] = tuple(
            make_square(sq.row + dr, sq.col + dc)
            for dr, dc in offsets
            if is_valid_square(sq.row + dr, sq.col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            row = sq.row + dr
            col = sq.col + dc
            ray: list[Square] = []
            while is_valid_square(row, col):
                ray.append(Square(row, col))
                row += dr
                col += dc
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_WAZIR_TARGETS = _build_targets(ORTHOGONAL_DIRS)

_ORTHOGONAL_RAYS = _build_rays(ORTHOGONAL_DIRS)
_DIAGONAL_RAYS = _build_rays(DIAGONAL_DIRS)


class MoveGenerator:
    """Generates the moves available on one :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def moves_from(self, sq: Square) -> list[Move]:
        """Moves for the piece on *sq*; empty for an empty or off-board square."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Move] = []
        ptype = piece.piece_type
        if ptype == PieceType.KING:
            self._gen_leaper(sq, piece, _KING_TARGETS[sq], moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(sq, piece, _ORTHOGONAL_RAYS[sq], moves)
            self._gen_sliding(sq, piece, _DIAGONAL_RAYS[sq], moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(sq, piece, _ORTHOGONAL_RAYS[sq], moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_leaper(sq, piece, _KNIGHT_TARGETS[sq], moves)
        elif ptype == PieceType.BISHOP:
            # Variant bishop: diagonal slider plus a one-step orthogonal hop.
            self._gen_sliding(sq, piece, _DIAGONAL_RAYS[sq], moves)
            self._gen_leaper(sq, piece, _WAZIR_TARGETS[sq], moves)
        else:
            self._gen_pawn(sq, piece, moves)
        return moves

    def generate_moves(self, color: Color) -> list[Move]:
        """All moves for *color*, scanning its pieces in row-major order."""
        moves: list[Move] = []
        for sq, _piece in self._board.pieces(color):
            moves.extend(self.moves_from(sq))
        return moves

    def has_moves(self, color: Color) -> bool:
        """Whether *color* has at least one move."""
        return any(self.moves_from(sq) for sq, _piece in self._board.pieces(color))

    def attackers_of(self, target: Square, by_color: Color) -> int:
        """Number of *by_color* pieces with a move landing on *target*."""
        count = 0
        for sq, _piece in self._board.pieces(by_color):
            if any(move.to_sq == target for move in self.moves_from(sq)):
                count += 1
        return count

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        direction = Board.pawn_direction(piece.color)
        forward = Square(sq.row + direction, sq.col)

        if is_valid_square(forward.row, forward.col) and board.is_empty(forward):
            moves.append(Move(sq, forward, piece))
            if Board.is_pawn_start_row(piece, sq.row):
                double = Square(sq.row + 2 * direction, sq.col)
                if is_valid_square(double.row, double.col) and board.is_empty(double):
                    moves.append(Move(sq, double, piece))

        for cap_col in (sq.col - 1, sq.col + 1):
            if not is_valid_square(forward.row, cap_col):
                continue
            cap_sq = Square(forward.row, cap_col)
            if are_enemies(piece, board[cap_sq]):
                moves.append(Move(sq, cap_sq, piece, is_capture=True))

    def _gen_leaper(
        self,
        sq: Square,
        piece: Piece,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq, piece))
            elif are_enemies(piece, target):
                moves.append(Move(sq, to_sq, piece, is_capture=True))

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq, piece))
                    continue
                if are_enemies(piece, target):
                    moves.append(Move(sq, to_sq, piece, is_capture=True))
                break


# ── Functional surface ───────────────────────────────────────────────────────


def legal_moves(board: Board, sq: Square) -> list[Move]:
    """Moves for the piece on *sq*."""
    return MoveGenerator(board).moves_from(sq)


def generate_all_moves(board: Board, color: Color) -> list[Move]:
    """Every move available to *color*."""
    return MoveGenerator(board).generate_moves(color)


def has_legal_moves(board: Board, color: Color) -> bool:
    """Whether *color* can move at all. ``False`` means it has been stalemated."""
    return MoveGenerator(board).has_moves(color)


def is_legal_move(board: Board, from_sq: Square, to_sq: Square) -> bool:
    return any(move.to_sq == to_sq for move in legal_moves(board, from_sq))


def execute_move(board: Board, from_sq: Square, to_sq: Square) -> MoveResult:
    """Apply a move and report what it did; *board* itself is left untouched."""
    piece = board[from_sq]
    captured = board[to_sq]
    return MoveResult(
        board=board.with_move(from_sq, to_sq),
        captured_piece=captured,
        is_promotion=Board.is_promotion_rank(piece, to_sq.row),
        captured_king=captured is not None and captured.piece_type == PieceType.KING,
    )


def execute_promotion(board: Board, sq: Square, piece_type: PieceType) -> Board:
    """Replace the pawn on *sq* with *piece_type* of the same color."""
    if piece_type not in PROMOTION_TYPES:
        raise ValueError(f"Cannot promote to {piece_type.name}")
    pawn = board[sq]
    if pawn is None or pawn.piece_type != PieceType.PAWN:
        raise ValueError(f"No pawn to promote on {sq}")
    return board.set(sq.row, sq.col, Piece(pawn.color, piece_type))
