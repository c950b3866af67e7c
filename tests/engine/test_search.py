"""Tests for shared engine models."""

import dataclasses

import pytest

from robochess.engine import DefaultEngine, HeuristicEngine, SearchResult, SelectorWeights


class TestSelectorWeights:
    def test_defaults(self) -> None:
        weights = SelectorWeights()
        assert weights.risk_factor == 0.9
        assert weights.promotion_bonus == 8.0
        assert weights.castling_bonus == 0.5

    def test_negative_risk_rejected(self) -> None:
        with pytest.raises(ValueError, match="risk_factor"):
            SelectorWeights(risk_factor=-0.1)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            SelectorWeights().risk_factor = 1.0  # type: ignore[misc]


class TestEngineDefaults:
    def test_default_engine_is_heuristic(self) -> None:
        assert DefaultEngine is HeuristicEngine

    def test_engine_keeps_weights(self) -> None:
        weights = SelectorWeights(castling_bonus=1.5)
        assert HeuristicEngine(weights).weights is weights
        assert HeuristicEngine().weights == SelectorWeights()

    def test_search_result_fields(self) -> None:
        result = SearchResult(best_move=None, score=0.0, state=None, candidates=0)
        assert result.best_move is None
        assert result.candidates == 0
