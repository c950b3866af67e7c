"""Move legality, move enumeration and threat detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from robochess.core.enums import Color, PieceType
from robochess.core.move import Move
from robochess.core.piece import Piece
from robochess.core.types import ALL_POSITIONS, Delta, Position

if TYPE_CHECKING:
    from robochess.core.game import Game


KNIGHT_OFFSETS: frozenset[Delta] = frozenset(
    (
        Delta(1, 2),
        Delta(-1, 2),
        Delta(2, 1),
        Delta(-2, 1),
        Delta(1, -2),
        Delta(-1, -2),
        Delta(2, -1),
        Delta(-2, -1),
    )
)

_KING_FILE = 4
_KINGSIDE_FILE = 6
_QUEENSIDE_FILE = 2
_FALLBACK_KING_POSITION = Position(0, 0)


class MoveGenerator:
    """Answers legality and threat questions about a :class:`Game`.

    Legality is judged square by square: a move is legal when the piece's
    movement rules allow it, regardless of whether it exposes the mover's
    own king.  :meth:`generate_legal_moves` adds that last filter by
    simulating each move on a copy of the game.
    """

    __slots__ = ("_game", "_board")

    def __init__(self, game: Game) -> None:
        self._game = game
        self._board = game.board

    # -- Legality -----------------------------------------------------------

    def can_move(self, from_pos: Position, to_pos: Position) -> bool:
        """Whether the piece on *from_pos* may move to *to_pos*."""
        board = self._board
        this = board.piece_at(from_pos)
        if this is None or not to_pos.is_on_board:
            return False
        delta = to_pos - from_pos

        other = board.piece_at(to_pos)
        if other is not None:
            if other.color == this.color:
                return False
            if this.piece_type == PieceType.PAWN:
                return self.pawn_can_take(from_pos, delta)

        ptype = this.piece_type
        if ptype == PieceType.PAWN:
            return self._pawn_can_advance(this, from_pos, to_pos, delta)
        if ptype == PieceType.ROOK:
            return (delta.x == 0 or delta.y == 0) and not board.pieces_exist_between(
                from_pos, to_pos
            )
        if ptype == PieceType.BISHOP:
            return abs(delta.x) == abs(delta.y) and not board.pieces_exist_between(
                from_pos, to_pos
            )
        if ptype == PieceType.QUEEN:
            return (
                delta.x == 0 or delta.y == 0 or abs(delta.x) == abs(delta.y)
            ) and not board.pieces_exist_between(from_pos, to_pos)
        if ptype == PieceType.KING:
            if abs(delta.x) <= 1 and abs(delta.y) <= 1:
                return True
            return self.castling_permitted(from_pos, to_pos)
        return delta in KNIGHT_OFFSETS

    def can_move_by(self, from_pos: Position, delta: Delta) -> bool:
        return self.can_move(from_pos, from_pos + delta)

    def pawn_can_take(self, from_pos: Position, delta: Delta) -> bool:
        """Diagonal one-step capture geometry for the pawn on *from_pos*."""
        pawn = self._board.piece_at(from_pos)
        if pawn is None or abs(delta.x) != 1:
            return False
        return delta.y == pawn.color.forward

    def en_passant_permitted(self, from_pos: Position, to_pos: Position) -> bool:
        """Whether *from_pos* -> *to_pos* captures the pawn that just passed."""
        board = self._board
        this = board.piece_at(from_pos)
        if this is None or this.piece_type != PieceType.PAWN:
            return False
        if not self.pawn_can_take(from_pos, to_pos - from_pos):
            return False

        last = self._game.last_move
        if last is None:
            return False
        if last.to_pos.x != to_pos.x:
            return False
        passed = board.piece_at(last.to_pos)
        if (
            passed is None
            or passed.piece_type != PieceType.PAWN
            or passed.color == this.color
        ):
            return False

        # The passing pawn jumped from one row before to_pos to one row after.
        step = passed.color.forward
        return (
            last.from_pos.y == to_pos.y - step and last.to_pos.y == to_pos.y + step
        )

    def piece_has_moved(self, position: Position) -> bool:
        """Whether any move in the history started on *position*."""
        return any(move.from_pos == position for move in self._game.history)

    def castling_permitted(self, from_pos: Position, to_pos: Position) -> bool:
        board = self._board
        king = board.piece_at(from_pos)
        if king is None or king.piece_type != PieceType.KING:
            return False

        rank = king.color.home_rank
        if (
            from_pos.y != rank
            or to_pos.y != rank
            or from_pos.x != _KING_FILE
            or to_pos.x not in (_QUEENSIDE_FILE, _KINGSIDE_FILE)
        ):
            return False

        if self.piece_has_moved(Position(_KING_FILE, rank)):
            return False
        kingside = to_pos.x == _KINGSIDE_FILE
        rook_pos = Position(7 if kingside else 0, rank)
        if self.piece_has_moved(rook_pos):
            return False

        between = range(5, 7) if kingside else range(1, 4)
        if any(board.piece_at(Position(x, rank)) is not None for x in between):
            return False

        # The king may not start in, pass through, or land on an attacked square.
        path = range(4, 7) if kingside else range(2, 5)
        opponent = king.color.opposite
        return not any(
            self.is_position_threatened(Position(x, rank), opponent) for x in path
        )

    # -- Enumeration --------------------------------------------------------

    def moves_for_piece(self, position: Position) -> list[Position]:
        """Every square the piece on *position* may move to."""
        return [to_pos for to_pos in ALL_POSITIONS if self.can_move(position, to_pos)]

    def generate_moves(self, color: Color) -> list[Move]:
        """All moves for *color* that obey the movement rules.

        These may still leave *color*'s own king in check.
        """
        moves: list[Move] = []
        append = moves.append
        for from_pos, _piece in self._board.pieces(color):
            for to_pos in ALL_POSITIONS:
                if self.can_move(from_pos, to_pos):
                    append(Move(from_pos, to_pos))
        return moves

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """Moves for *color* that do not leave its own king in check."""
        return [
            move
            for move in self.generate_moves(color)
            if not self.leaves_king_in_check(move, color)
        ]

    def leaves_king_in_check(self, move: Move, color: Color) -> bool:
        """Simulate *move* on a copy and test *color*'s king."""
        trial = self._game.copy()
        trial.move(move.from_pos, move.to_pos)
        return MoveGenerator(trial).is_in_check(color)

    # -- Threat detection ---------------------------------------------------

    def is_piece_threatened(self, position: Position) -> bool:
        """Whether any piece on the board may move onto *position*."""
        return any(
            self.can_move(from_pos, position)
            for from_pos, _piece in self._board.all_pieces()
        )

    def is_position_threatened(self, position: Position, by_color: Color) -> bool:
        """Whether *by_color* attacks *position*, occupied or not.

        Pawns count their diagonal capture squares even when empty.
        """
        for from_pos, piece in self._board.pieces(by_color):
            if piece.piece_type == PieceType.PAWN:
                if self.pawn_can_take(from_pos, position - from_pos):
                    return True
            elif self.can_move(from_pos, position):
                return True
        return False

    def king_position(self, color: Color) -> Position:
        """Square of *color*'s king; ``Position(0, 0)`` if there is none."""
        position = self._board.first_position(
            lambda p: p.piece_type == PieceType.KING and p.color == color
        )
        return position if position is not None else _FALLBACK_KING_POSITION

    def is_in_check(self, color: Color) -> bool:
        return self.is_piece_threatened(self.king_position(color))

    def threatened_pieces(self, color: Color) -> list[tuple[Position, Piece]]:
        """Pieces of *color* that some piece could move onto."""
        return [
            (position, piece)
            for position, piece in self._board.pieces(color)
            if self.is_piece_threatened(position)
        ]

    # -- Helpers (private) --------------------------------------------------

    def _pawn_can_advance(
        self, pawn: Piece, from_pos: Position, to_pos: Position, delta: Delta
    ) -> bool:
        if self.en_passant_permitted(from_pos, to_pos):
            return True
        if delta.x != 0:
            return False
        step = pawn.color.forward
        if from_pos.y == pawn.color.pawn_rank:
            return delta.y in (step, 2 * step) and not self._board.pieces_exist_between(
                from_pos, to_pos
            )
        return delta.y == step
