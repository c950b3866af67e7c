"""Tests for Rules: check, checkmate and stalemate detection."""

from robochess.core.enums import Color, GameState
from robochess.core.game import Game
from robochess.core.move import Move
from robochess.core.rules import Rules
from robochess.core.types import parse_square

sq = parse_square

EMPTY = ".. .. .. .. .. .. .. .."


def _after(game: Game, last_move: str) -> Game:
    """Same board with *last_move* recorded, so its mover's opponent is to move."""
    return Game(game.board, [Move(sq(last_move[:2]), sq(last_move[2:]))])


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(Game())

    def test_fools_mate_in_check(self, play) -> None:
        game = play(Game(), "f2f3", "e7e5", "g2g4", "d8h4")
        assert Rules.is_in_check(game)
        assert Rules.is_in_check(game, Color.WHITE)
        assert not Rules.is_in_check(game, Color.BLACK)

    def test_check_with_escape(self, game_from_rows) -> None:
        game = _after(
            game_from_rows(
                [
                    ".. .. .. .. BK4 .. .. ..",
                    EMPTY,
                    EMPTY,
                    EMPTY,
                    EMPTY,
                    EMPTY,
                    EMPTY,
                    "BR0 .. .. .. WK4 .. .. ..",
                ]
            ),
            "a2a1",
        )
        assert game.turn == Color.WHITE
        assert Rules.game_state(game) == GameState.CHECK
        assert not Rules.is_checkmate(game)


class TestCheckmate:
    def test_fools_mate(self, play) -> None:
        game = play(Game(), "f2f3", "e7e5", "g2g4", "d8h4")
        assert Rules.is_checkmate(game)
        assert Rules.game_state(game) == GameState.CHECKMATE
        assert not Rules.has_legal_move(game, Color.WHITE)

    def test_back_rank_mate(self, game_from_rows) -> None:
        # Rook on a8 checks the king on d8; the white king on d6 covers the rest.
        game = _after(
            game_from_rows(
                [
                    "WR0 .. .. BK4 .. .. .. ..",
                    EMPTY,
                    ".. .. .. WK4 .. .. .. ..",
                    EMPTY,
                    EMPTY,
                    EMPTY,
                    EMPTY,
                    EMPTY,
                ]
            ),
            "a1a8",
        )
        assert game.turn == Color.BLACK
        assert Rules.is_checkmate(game)

    def test_capture_the_checker_is_not_mate(self, play) -> None:
        # 1.e4 f6 2.Qh5+ : black can block with g6.
        game = play(Game(), "e2e4", "f7f6", "d1h5")
        assert Rules.game_state(game) == GameState.CHECK


class TestStalemate:
    def test_king_trapped(self, game_from_rows) -> None:
        # Black king h8, white king f6 and queen g6, black to move.
        game = _after(
            game_from_rows(
                [
                    ".. .. .. .. .. .. .. BK4",
                    EMPTY,
                    ".. .. .. .. .. WK4 WQ3 ..",
                    EMPTY,
                    EMPTY,
                    EMPTY,
                    EMPTY,
                    EMPTY,
                ]
            ),
            "g5g6",
        )
        assert game.turn == Color.BLACK
        assert not Rules.is_in_check(game)
        assert Rules.is_stalemate(game)
        assert Rules.game_state(game) == GameState.STALEMATE

    def test_not_stalemate_when_has_moves(self, game_from_rows) -> None:
        game = _after(
            game_from_rows(
                [
                    ".. .. .. .. .. .. .. BK4",
                    EMPTY,
                    ".. .. .. .. .. WK4 .. ..",
                    EMPTY,
                    EMPTY,
                    EMPTY,
                    EMPTY,
                    EMPTY,
                ]
            ),
            "f5f6",
        )
        assert not Rules.is_stalemate(game)
        assert Rules.game_state(game) == GameState.IDLE


class TestGameState:
    def test_idle_at_start(self) -> None:
        assert Rules.game_state(Game()) == GameState.IDLE
