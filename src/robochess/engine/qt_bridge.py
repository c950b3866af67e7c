"""Qt bridge to run the move selector in a worker thread."""

from __future__ import annotations

import logging
import random

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from robochess.core.enums import Color
from robochess.core.game import Game
from robochess.engine.heuristic import HeuristicEngine
from robochess.engine.search import SelectorWeights

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that picks moves on demand.

    The worker only ever evaluates a copy of the game it receives, so the
    caller's :class:`Game` stays owned by the GUI thread.
    """

    best_move_ready = pyqtSignal(int, object, float)
    search_no_move = pyqtSignal(int, object)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_rng")

    def __init__(
        self,
        *,
        weights: SelectorWeights | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__()
        self._engine = HeuristicEngine(weights)
        self._rng = random.Random(seed)

    @pyqtSlot(object, object, int)
    def request_move(self, game_obj: object, color_obj: object, request_id: int) -> None:
        """Pick a move for *color_obj* in *game_obj* and emit the result."""
        if not isinstance(game_obj, Game):
            self.search_error.emit(request_id, "Engine received invalid game")
            return
        if not isinstance(color_obj, Color):
            self.search_error.emit(request_id, "Engine received invalid color")
            return

        trial = game_obj.copy()
        try:
            result = self._engine.search(trial, color_obj, self._rng)
        except Exception as exc:
            _LOGGER.exception("Move selection failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id, trial.state)
            return

        self.best_move_ready.emit(request_id, result.best_move, result.score)

    @pyqtSlot(float, float, float)
    def set_weights(
        self, risk_factor: float, promotion_bonus: float, castling_bonus: float
    ) -> None:
        """Update selector weights (takes effect on the next request)."""
        self._engine = HeuristicEngine(
            SelectorWeights(
                risk_factor=risk_factor,
                promotion_bonus=promotion_bonus,
                castling_bonus=castling_bonus,
            )
        )
