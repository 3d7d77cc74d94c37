"""Board - immutable piece placement on the 6x5 board."""

from __future__ import annotations

from collections.abc import Iterable

from minitchess.core.enums import Color, PieceType
from minitchess.core.piece import Piece
from minitchess.core.types import COLS, ROWS, Square, is_valid_square

PAWN_START_ROWS: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 4}
PROMOTION_ROWS: dict[Color, int] = {Color.WHITE: 5, Color.BLACK: 0}

# Black's back rank is White's in reverse file order, not a mirror.
_WHITE_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
)
_BLACK_BACK_RANK = tuple(reversed(_WHITE_BACK_RANK))


def _index(row: int, col: int) -> int:
    return row * COLS + col


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    """Immutable 30-square board.

    Every "mutating" operation returns a new :class:`Board`; instances are
    safe to share between search branches.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        if squares is None:
            self._squares: tuple[Piece | None, ...] = (None,) * (ROWS * COLS)
            return
        cells = tuple(squares)
        if len(cells) != ROWS * COLS:
            raise ValueError(f"Board needs {ROWS * COLS} squares, got {len(cells)}")
        self._squares = cells

    # -- Element access -----------------------------------------------------

    def get(self, row: int, col: int) -> Piece | None:
        """Piece at ``(row, col)``; ``None`` when empty or off-board."""
        if not is_valid_square(row, col):
            return None
        return self._squares[_index(row, col)]

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.get(sq.row, sq.col)

    def set(self, row: int, col: int, piece: Piece | None) -> Board:
        """Return a copy with *piece* on ``(row, col)``.

        Off-board writes are ignored and return an unchanged board.
        """
        if not is_valid_square(row, col):
            return self
        idx = _index(row, col)
        if self._squares[idx] == piece:
            return self
        cells = list(self._squares)
        cells[idx] = piece
        return Board(cells)

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def with_move(self, from_sq: Square, to_sq: Square) -> Board:
        """Return a copy with the piece on *from_sq* relocated to *to_sq*."""
        if not (
            is_valid_square(from_sq.row, from_sq.col)
            and is_valid_square(to_sq.row, to_sq.col)
        ):
            return self
        cells = list(self._squares)
        src = _index(from_sq.row, from_sq.col)
        cells[_index(to_sq.row, to_sq.col)] = cells[src]
        cells[src] = None
        return Board(cells)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """``(square, piece)`` pairs for *color*, in row-major order."""
        found: list[tuple[Square, Piece]] = []
        for idx, piece in enumerate(self._squares):
            if piece is not None and piece.color == color:
                found.append((Square(*divmod(idx, COLS)), piece))
        return found

    def count_pieces(self, color: Color) -> int:
        return sum(
            1 for piece in self._squares if piece is not None and piece.color == color
        )

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it has been captured."""
        king = Piece(color, PieceType.KING)
        for idx, piece in enumerate(self._squares):
            if piece == king:
                return Square(*divmod(idx, COLS))
        return None

    def path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether every square strictly between the two squares is empty.

        Only defined for squares sharing a rank, file or diagonal; any other
        pair is reported as blocked.
        """
        d_row = to_sq.row - from_sq.row
        d_col = to_sq.col - from_sq.col
        if d_row and d_col and abs(d_row) != abs(d_col):
            return False

        step_row, step_col = _sign(d_row), _sign(d_col)
        row = from_sq.row + step_row
        col = from_sq.col + step_col
        while (row, col) != (to_sq.row, to_sq.col):
            if self.get(row, col) is not None:
                return False
            row += step_row
            col += step_col
        return True

    # -- Rank rules ---------------------------------------------------------

    @staticmethod
    def pawn_direction(color: Color) -> int:
        """Forward row step: +1 for White, -1 for Black."""
        return 1 if color == Color.WHITE else -1

    @staticmethod
    def is_pawn_start_row(piece: Piece | None, row: int) -> bool:
        if piece is None or piece.piece_type != PieceType.PAWN:
            return False
        return row == PAWN_START_ROWS[piece.color]

    @staticmethod
    def is_promotion_rank(piece: Piece | None, row: int) -> bool:
        if piece is None or piece.piece_type != PieceType.PAWN:
            return False
        return row == PROMOTION_ROWS[piece.color]

    # -- Copying ------------------------------------------------------------

    def clone(self) -> Board:
        # The cell tuple is immutable, so sharing it shares no mutable state.
        return Board(self._squares)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """MinitChess starting position."""
        cells: list[Piece | None] = [None] * (ROWS * COLS)
        for col in range(COLS):
            cells[_index(0, col)] = Piece(Color.WHITE, _WHITE_BACK_RANK[col])
            cells[_index(1, col)] = Piece(Color.WHITE, PieceType.PAWN)
            cells[_index(4, col)] = Piece(Color.BLACK, PieceType.PAWN)
            cells[_index(5, col)] = Piece(Color.BLACK, _BLACK_BACK_RANK[col])
        return cls(cells)

    # -- Dunder helpers -----------------------------------------------------

    def __iter__(self):
        return iter(self._squares)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(ROWS - 1, -1, -1):
            cells = []
            for col in range(COLS):
                p = self.get(row, col)
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e")
        return "\n".join(rows)


def create_board() -> Board:
    """Fresh board in the starting position."""
    return Board.initial()
