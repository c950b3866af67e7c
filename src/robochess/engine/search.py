"""Shared engine models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import random

    from robochess.core.enums import Color, GameState
    from robochess.core.game import Game
    from robochess.core.move import Move


@dataclass(slots=True, frozen=True)
class SelectorWeights:
    """Tuning knobs of the single-ply move selector."""

    # Fraction of a threatened piece's material counted as already lost.
    risk_factor: float = 0.9
    promotion_bonus: float = 8.0
    castling_bonus: float = 0.5

    def __post_init__(self) -> None:
        if self.risk_factor < 0:
            raise ValueError("risk_factor must be >= 0")


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by an engine for one move request."""

    best_move: Move | None
    score: float
    state: GameState | None
    candidates: int


class IEngine(Protocol):
    """Protocol for move selectors used by the presentation layer."""

    def search(
        self,
        game: Game,
        color: Color,
        rng: random.Random | None = None,
    ) -> SearchResult: ...
