"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from robochess.core import Game, parse_square

    game = Game()
    game.move(parse_square("e2"), parse_square("e4"))
    print(game.turn, game.state)
    print(game.next_move(game.turn))
"""

from robochess.core.board import Board
from robochess.core.enums import Color, GameState, PieceType
from robochess.core.game import Game
from robochess.core.move import Move
from robochess.core.move_generator import MoveGenerator
from robochess.core.piece import Piece
from robochess.core.rules import Rules
from robochess.core.types import (
    ALL_POSITIONS,
    Delta,
    Position,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameState",
    "PieceType",
    # Types / helpers
    "ALL_POSITIONS",
    "Delta",
    "Position",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Game",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
]
