"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from minitchess.core.board import Board
from minitchess.core.enums import Color
from minitchess.engine.minimax import MinimaxEngine
from minitchess.engine.search import DEFAULT_CONFIG, IEngine

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    The search itself cannot be interrupted; ``cancel`` marks the request
    in flight as stale so its result is reported as cancelled.
    """

    best_move_ready = pyqtSignal(int, object, float, int, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, float, int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine")

    def __init__(self, *, depth: int = 3) -> None:
        super().__init__()
        self._engine: IEngine = MinimaxEngine(DEFAULT_CONFIG.with_depth(depth))
        self._cancel_event = threading.Event()

    @pyqtSlot(object, object, int, int)
    def request_move(
        self,
        board_obj: object,
        color_obj: object,
        ply_count: int,
        request_id: int,
    ) -> None:
        """Search for *color_obj*'s best move on *board_obj* and emit result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return
        if not isinstance(color_obj, Color):
            self.search_error.emit(request_id, "Engine received invalid color")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(board_obj, color_obj, ply_count)
        except Exception as exc:
            _LOGGER.warning("Engine search failed for request %d: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(
                request_id,
                result.score,
                result.depth,
                result.nodes,
            )
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Discard the result of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_depth(self, depth: int) -> None:
        """Update search depth (takes effect on the next search)."""
        self._engine = MinimaxEngine(DEFAULT_CONFIG.with_depth(depth))
