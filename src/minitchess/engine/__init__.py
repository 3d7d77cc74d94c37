"""Engine package: minimax search and its configuration.

The Qt worker lives in :mod:`minitchess.engine.qt_bridge` and is imported
explicitly so the search stays usable without a Qt runtime.
"""

from minitchess.engine.minimax import MinimaxEngine, best_move
from minitchess.engine.search import (
    DEFAULT_CONFIG,
    IEngine,
    SearchConfig,
    SearchResult,
)
from minitchess.engine.tables import OPENING_MOVES, PIECE_SQUARE_TABLES, OpeningMove

__all__ = [
    "DEFAULT_CONFIG",
    "IEngine",
    "MinimaxEngine",
    "OPENING_MOVES",
    "OpeningMove",
    "PIECE_SQUARE_TABLES",
    "SearchConfig",
    "SearchResult",
    "best_move",
]
