"""Move and move-result value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from minitchess.core.enums import PieceType
from minitchess.core.piece import Piece
from minitchess.core.types import Square, square_name

if TYPE_CHECKING:
    from minitchess.core.board import Board


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    is_capture: bool = False

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def coordinates(self) -> str:
        """Long coordinate form, e.g. ``c2c4``."""
        return str(self)

    @property
    def is_pawn_move(self) -> bool:
        return self.piece.piece_type == PieceType.PAWN


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of applying a move to a board.

    ``captured_king`` signals an immediate win; acting on it is up to the
    caller.
    """

    board: Board
    captured_piece: Piece | None = None
    is_promotion: bool = False
    captured_king: bool = False
