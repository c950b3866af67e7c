"""robochess - chess rules engine with a single-ply heuristic move selector."""

__version__ = "0.1.0"
