"""Game - board plus move history, the entry point for presentation code."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from robochess.core.board import Board
from robochess.core.enums import Color, GameState, PieceType
from robochess.core.move import Move
from robochess.core.move_generator import MoveGenerator
from robochess.core.rules import Rules
from robochess.core.types import Position

if TYPE_CHECKING:
    import random

    from robochess.engine.search import SelectorWeights


class Game:
    """A chess game: a :class:`Board` and the ordered moves played on it.

    ``turn`` and ``state`` are recomputed from the board and history on
    every access.  The game only changes through :meth:`move` and
    :meth:`promote_piece` (or their ``try_`` variants); every "what if"
    question is answered on a :meth:`copy`.

    ``move`` and ``promote_piece`` trust the caller to have checked
    :meth:`can_move` / :meth:`can_promote_piece` first and only assert it.
    """

    __slots__ = ("_board", "_history")

    def __init__(
        self,
        board: Board | None = None,
        history: Iterable[Move] = (),
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._history: list[Move] = list(history)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def history(self) -> tuple[Move, ...]:
        return tuple(self._history)

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    @property
    def turn(self) -> Color:
        """Color to move: the opponent of whoever made the last move."""
        last = self.last_move
        if last is None:
            return Color.WHITE
        mover = self._board.piece_at(last.to_pos)
        return mover.color.opposite if mover is not None else Color.WHITE

    @property
    def state(self) -> GameState:
        return Rules.game_state(self)

    def copy(self) -> Game:
        return Game(self._board.copy(), self._history)

    # ── Queries ──────────────────────────────────────────────────────────

    def can_select_piece(self, position: Position) -> bool:
        """Whether a piece of the side to move stands on *position*."""
        piece = self._board.piece_at(position)
        return piece is not None and piece.color == self.turn

    def can_move(self, from_pos: Position, to_pos: Position) -> bool:
        return MoveGenerator(self).can_move(from_pos, to_pos)

    def moves_for_piece(self, position: Position) -> list[Position]:
        return MoveGenerator(self).moves_for_piece(position)

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        """Moves for *color* (default: side to move) that keep its king safe."""
        return MoveGenerator(self).generate_legal_moves(
            self.turn if color is None else color
        )

    def is_in_check(self, color: Color) -> bool:
        return MoveGenerator(self).is_in_check(color)

    def is_piece_threatened(self, position: Position) -> bool:
        return MoveGenerator(self).is_piece_threatened(position)

    def can_promote_piece(self, position: Position) -> bool:
        """Whether a pawn stands on its last rank at *position*."""
        piece = self._board.piece_at(position)
        return (
            piece is not None
            and piece.piece_type == PieceType.PAWN
            and position.y == piece.color.promotion_rank
        )

    # ── Mutation ─────────────────────────────────────────────────────────

    def move(self, from_pos: Position, to_pos: Position) -> None:
        """Play a move previously validated with :meth:`can_move`."""
        gen = MoveGenerator(self)
        assert gen.can_move(from_pos, to_pos), f"Illegal move {from_pos}->{to_pos}"

        board = self._board
        piece = board.piece_at(from_pos)
        assert piece is not None
        if piece.piece_type == PieceType.PAWN and gen.en_passant_permitted(
            from_pos, to_pos
        ):
            board.remove_piece(Position(to_pos.x, from_pos.y))
        elif piece.piece_type == PieceType.KING and abs(to_pos.x - from_pos.x) > 1:
            # Castling: the rook jumps to the square the king passed over.
            kingside = to_pos.x == 6
            board.move_piece(
                Position(7 if kingside else 0, to_pos.y),
                Position(5 if kingside else 3, to_pos.y),
            )

        board.move_piece(from_pos, to_pos)
        self._history.append(Move(from_pos, to_pos))

    def try_move(self, from_pos: Position, to_pos: Position) -> bool:
        """Play the move if legal; leave the game untouched otherwise."""
        if not self.can_move(from_pos, to_pos):
            return False
        self.move(from_pos, to_pos)
        return True

    def promote_piece(self, position: Position, piece_type: PieceType) -> None:
        """Promote a pawn previously validated with :meth:`can_promote_piece`."""
        assert self.can_promote_piece(position), f"Cannot promote on {position}"
        self._board.promote_piece(position, piece_type)

    def try_promote_piece(self, position: Position, piece_type: PieceType) -> bool:
        if not self.can_promote_piece(position):
            return False
        self.promote_piece(position, piece_type)
        return True

    # ── Automated play ───────────────────────────────────────────────────

    def next_move(
        self,
        color: Color,
        rng: random.Random | None = None,
        weights: SelectorWeights | None = None,
    ) -> Move | None:
        """Move the heuristic selector prefers for *color*, if any."""
        from robochess.engine.heuristic import HeuristicEngine

        return HeuristicEngine(weights).search(self, color, rng).best_move

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"Game(turn={self.turn}, moves={len(self._history)})\n{self._board!r}"
