"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Callable, Iterator, Sequence

import pytest

from robochess.core.board import Board
from robochess.core.game import Game
from robochess.core.types import parse_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal/slot tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so selector tests are reproducible."""
    return random.Random(1234)


def _play(game: Game, *moves: str) -> Game:
    """Play moves given as ``"e2e4"`` strings, asserting each is legal."""
    for text in moves:
        from_pos, to_pos = parse_square(text[:2]), parse_square(text[2:4])
        assert game.can_move(from_pos, to_pos), f"{text} should be legal"
        game.move(from_pos, to_pos)
    return game


def _game_from_rows(rows: Sequence[str]) -> Game:
    """Build a game from 8 strings of space-separated codes (``..`` = empty).

    Example row: ``"BR0 .. .. .. BK4 .. .. BR7"``.
    """
    grid = [
        [None if cell == ".." else cell for cell in row.split()] for row in rows
    ]
    return Game(Board.from_rows(grid))


@pytest.fixture
def play() -> Callable[..., Game]:
    """``play(game, "e2e4", "e7e5")`` plays legal moves in order."""
    return _play


@pytest.fixture
def game_from_rows() -> Callable[[Sequence[str]], Game]:
    return _game_from_rows
