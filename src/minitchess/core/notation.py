"""Move notation and the compact board-layout text format.

Layout text lists the six ranks from rank 6 down to rank 1, separated by
``/``. Pieces use their notation letters and digits count runs of empty
squares, e.g. the starting position is ``kqbnr/ppppp/5/5/PPPPP/RNBQK``.
"""

from __future__ import annotations

from minitchess.core.board import Board
from minitchess.core.move import Move
from minitchess.core.piece import Piece
from minitchess.core.types import COLS, ROWS, square_name

STARTING_LAYOUT = "kqbnr/ppppp/5/5/PPPPP/RNBQK"


def to_notation(move: Move) -> str:
    """Short algebraic form of *move*.

    Same-type pieces reaching one square are not disambiguated.
    """
    dest = square_name(move.to_sq)
    if move.is_pawn_move:
        if move.is_capture:
            return square_name(move.from_sq)[0] + "x" + dest
        return dest
    capture = "x" if move.is_capture else ""
    return move.piece.piece_type.letter + capture + dest


def board_from_layout(layout: str) -> Board:
    """Parse layout text into a :class:`Board`."""
    ranks = layout.strip().split("/")
    if len(ranks) != ROWS:
        raise ValueError(f"Invalid layout (must contain {ROWS} ranks): {layout!r}")

    cells: list[Piece | None] = [None] * (ROWS * COLS)
    for rank_idx, rank_text in enumerate(ranks):
        row = ROWS - 1 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= COLS):
                    raise ValueError(f"Invalid layout digit {ch!r}: {layout!r}")
                col += step
            else:
                if col >= COLS:
                    raise ValueError(f"Invalid layout rank width: {layout!r}")
                cells[row * COLS + col] = Piece.from_char(ch)
                col += 1
            if col > COLS:
                raise ValueError(f"Invalid layout rank width: {layout!r}")
        if col != COLS:
            raise ValueError(f"Invalid layout rank width: {layout!r}")
    return Board(cells)


def board_to_layout(board: Board) -> str:
    """Serialise *board* to layout text."""
    rows: list[str] = []
    for row in range(ROWS - 1, -1, -1):
        empty = 0
        text = ""
        for col in range(COLS):
            piece = board.get(row, col)
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
