"""Greedy single-ply move selector.

This is a heuristic, not a search: each candidate is judged only by the
position it leads to immediately.  Preference order, highest first:

1. moves that deliver checkmate;
2. moves that leave the opponent idle or in check, by material score
   (captures, promotion bonus, minus the risk of losing a piece);
3. moves that stalemate the opponent, only when nothing else was found.

Equal scores fall back to small positional nudges (castle, keep the king
and rooks home, push pawns) and then to first-seen under a shuffled order.
"""

from __future__ import annotations

import logging
import random

from robochess.core.enums import Color, GameState, PieceType
from robochess.core.game import Game
from robochess.core.move import Move
from robochess.core.move_generator import MoveGenerator
from robochess.engine.search import IEngine, SearchResult, SelectorWeights

_LOGGER = logging.getLogger(__name__)


class HeuristicEngine(IEngine):
    """Scores every legal move of one side and keeps the preferred one."""

    __slots__ = ("_weights",)

    def __init__(self, weights: SelectorWeights | None = None) -> None:
        self._weights = weights if weights is not None else SelectorWeights()

    @property
    def weights(self) -> SelectorWeights:
        return self._weights

    def search(
        self,
        game: Game,
        color: Color,
        rng: random.Random | None = None,
    ) -> SearchResult:
        rng = rng if rng is not None else random.Random()
        weights = self._weights
        board = game.board
        history = game.history
        # The mover's own previous move, two plies back.
        own_last_move = history[-2] if len(history) > 1 else None

        candidates = MoveGenerator(game).generate_moves(color)
        rng.shuffle(candidates)

        best_move: Move | None = None
        best_state: GameState | None = None
        best_score = 0.0
        evaluated = 0

        for move in candidates:
            trial = game.copy()
            trial.move(move.from_pos, move.to_pos)
            trial_gen = MoveGenerator(trial)
            if trial_gen.is_in_check(color):
                continue
            evaluated += 1

            captured = board.piece_at(move.to_pos)
            score = float(captured.material if captured is not None else 0)
            if trial.can_promote_piece(move.to_pos):
                trial.promote_piece(move.to_pos, PieceType.QUEEN)
                score += weights.promotion_bonus

            state = trial.state
            if state == GameState.STALEMATE:
                if best_move is not None:
                    continue
            elif state == GameState.CHECK:
                moved = trial.board.piece_at(move.to_pos)
                if moved is not None and trial_gen.is_piece_threatened(move.to_pos):
                    score -= moved.material * weights.risk_factor
                if not self._check_is_acceptable(score, best_state, best_score):
                    continue
            elif state == GameState.IDLE:
                risk = max(
                    (piece.material for _, piece in trial_gen.threatened_pieces(color)),
                    default=0,
                )
                score -= risk * weights.risk_factor
                if best_state in (None, GameState.STALEMATE) or (
                    best_state in (GameState.IDLE, GameState.CHECK)
                    and score > best_score
                ):
                    pass
                elif (
                    best_state == GameState.IDLE
                    and best_move is not None
                    and score == best_score
                    and not trial_gen.is_piece_threatened(move.to_pos)
                ):
                    bonus = self._tie_break(game, color, move, best_move)
                    if bonus is None:
                        continue
                    score += bonus
                else:
                    continue

            if best_move is not None and own_last_move == move.reversed:
                continue

            best_move = move
            best_state = state
            best_score = score

        _LOGGER.debug(
            "Selected %s for %s (score=%.2f, state=%s, candidates=%d)",
            best_move,
            color,
            best_score,
            best_state.name if best_state is not None else None,
            evaluated,
        )
        return SearchResult(best_move, best_score, best_state, evaluated)

    # -- Helpers (private) --------------------------------------------------

    @staticmethod
    def _check_is_acceptable(
        score: float, best_state: GameState | None, best_score: float
    ) -> bool:
        if best_state in (None, GameState.STALEMATE):
            return True
        if best_state in (GameState.CHECK, GameState.IDLE):
            return score >= best_score
        return False

    def _tie_break(
        self, game: Game, color: Color, move: Move, best_move: Move
    ) -> float | None:
        """Bonus for replacing an equally scored best move, or ``None`` to keep it."""
        board = game.board
        piece = board.piece_at(move.from_pos)
        if piece is None:
            return 0.0

        if piece.piece_type == PieceType.KING and abs(move.to_pos.x - move.from_pos.x) > 1:
            return self._weights.castling_bonus
        if piece.piece_type in (PieceType.KING, PieceType.ROOK):
            return None

        if piece.piece_type == PieceType.PAWN:
            best_piece = board.piece_at(best_move.from_pos)
            if best_piece is None or best_piece.piece_type != PieceType.PAWN:
                return 0.0
            # Further toward the far side than the current best pawn move.
            advance = (move.to_pos.y - best_move.to_pos.y) * color.forward
            if advance > 0:
                return 0.0
        return None
