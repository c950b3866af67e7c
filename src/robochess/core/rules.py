"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from robochess.core.enums import Color, GameState
from robochess.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from robochess.core.game import Game


class Rules:
    """Static rule-checker that operates on a :class:`Game`."""

    @staticmethod
    def is_in_check(game: Game, color: Color | None = None) -> bool:
        gen = MoveGenerator(game)
        return gen.is_in_check(game.turn if color is None else color)

    @staticmethod
    def has_legal_move(game: Game, color: Color) -> bool:
        """Whether *color* has a move that keeps its own king safe."""
        gen = MoveGenerator(game)
        return any(
            not gen.leaves_king_in_check(move, color)
            for move in gen.generate_moves(color)
        )

    @staticmethod
    def is_checkmate(game: Game) -> bool:
        return Rules.game_state(game) == GameState.CHECKMATE

    @staticmethod
    def is_stalemate(game: Game) -> bool:
        return Rules.game_state(game) == GameState.STALEMATE

    @staticmethod
    def game_state(game: Game) -> GameState:
        """Situation of the side to move."""
        color = game.turn
        can_move = Rules.has_legal_move(game, color)
        if Rules.is_in_check(game, color):
            return GameState.CHECK if can_move else GameState.CHECKMATE
        return GameState.IDLE if can_move else GameState.STALEMATE
