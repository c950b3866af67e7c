"""Move selection package: heuristic selector and Qt worker bridge.

The Qt bridge is imported explicitly (``robochess.engine.qt_bridge``) so
the selector can be used without a Qt runtime.
"""

from robochess.engine.heuristic import HeuristicEngine
from robochess.engine.search import IEngine, SearchResult, SelectorWeights

DefaultEngine: type[IEngine] = HeuristicEngine

__all__ = [
    "DefaultEngine",
    "HeuristicEngine",
    "IEngine",
    "SearchResult",
    "SelectorWeights",
]
