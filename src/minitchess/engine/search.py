"""Shared engine configuration, search models and protocol."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Protocol

from minitchess.core.enums import Color, PieceType
from minitchess.core.piece import MATERIAL_VALUES
from minitchess.engine.tables import (
    OPENING_MOVES,
    PIECE_SQUARE_TABLES,
    OpeningMove,
    PieceSquareTable,
)

if TYPE_CHECKING:
    from minitchess.core.board import Board
    from minitchess.core.move import Move

# SearchResult.source values
SOURCE_OPENING = "opening"
SOURCE_KING_CAPTURE = "king_capture"
SOURCE_STALEMATE_WIN = "stalemate_win"
SOURCE_SEARCH = "search"
SOURCE_NONE = "none"


@dataclass(slots=True, frozen=True)
class SearchConfig:
    """Immutable engine configuration, fixed at engine construction."""

    depth: int = 3
    material: Mapping[PieceType, int] = field(default_factory=lambda: MATERIAL_VALUES)
    piece_square_tables: Mapping[PieceType, PieceSquareTable] = field(
        default_factory=lambda: PIECE_SQUARE_TABLES
    )
    openings: Mapping[Color, tuple[OpeningMove, ...]] = field(
        default_factory=lambda: OPENING_MOVES
    )
    opening_ply_limit: int = 4

    def __post_init__(self) -> None:
        if self.depth <= 0:
            raise ValueError("Search depth must be >= 1")
        if self.opening_ply_limit < 0:
            raise ValueError("Opening ply limit must be >= 0")

    def with_depth(self, depth: int) -> SearchConfig:
        """Copy of this config searching *depth* plies."""
        return replace(self, depth=depth)


DEFAULT_CONFIG = SearchConfig()


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: float
    depth: int
    nodes: int
    source: str = SOURCE_SEARCH


class IEngine(Protocol):
    """Protocol for engines used by the worker / game layer."""

    def search(
        self,
        board: Board,
        color: Color,
        ply_count: int = 0,
    ) -> SearchResult: ...
