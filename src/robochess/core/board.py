"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from robochess.core.enums import Color, PieceType
from robochess.core.piece import Piece
from robochess.core.types import ALL_POSITIONS, BOARD_SIZE, Delta, Position

PieceCode = str

_INITIAL_ROWS: tuple[tuple[PieceCode | None, ...], ...] = (
    ("BR0", "BN1", "BB2", "BQ3", "BK4", "BB5", "BN6", "BR7"),
    ("BP0", "BP1", "BP2", "BP3", "BP4", "BP5", "BP6", "BP7"),
    (None,) * BOARD_SIZE,
    (None,) * BOARD_SIZE,
    (None,) * BOARD_SIZE,
    (None,) * BOARD_SIZE,
    ("WP0", "WP1", "WP2", "WP3", "WP4", "WP5", "WP6", "WP7"),
    ("WR0", "WN1", "WB2", "WQ3", "WK4", "WB5", "WN6", "WR7"),
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    """Mutable 8x8 grid of optional pieces.

    The board only knows about placement.  Turns, history and legality
    live in :class:`~robochess.core.game.Game`.
    """

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def piece_at(self, position: Position) -> Piece | None:
        """Piece on *position*; ``None`` when empty or off the board."""
        if not position.is_on_board:
            return None
        return self._rows[position.y][position.x]

    def __getitem__(self, position: Position) -> Piece | None:
        return self.piece_at(position)

    def __setitem__(self, position: Position, piece: Piece | None) -> None:
        if not position.is_on_board:
            raise ValueError(f"Position off the board: {position}")
        self._rows[position.y][position.x] = piece

    def is_empty(self, position: Position) -> bool:
        return self.piece_at(position) is None

    # -- Query helpers ------------------------------------------------------

    @property
    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """Read-only snapshot of the grid, row by row, for rendering."""
        return tuple(tuple(row) for row in self._rows)

    def all_pieces(self) -> list[tuple[Position, Piece]]:
        """Every occupied square with its piece, in row-major order."""
        return [
            (position, piece)
            for position in ALL_POSITIONS
            if (piece := self._rows[position.y][position.x]) is not None
        ]

    def pieces(self, color: Color) -> list[tuple[Position, Piece]]:
        """Occupied squares belonging to *color*."""
        return [(pos, piece) for pos, piece in self.all_pieces() if piece.color == color]

    def first_position(self, predicate: Callable[[Piece], bool]) -> Position | None:
        """First position (row-major) whose piece satisfies *predicate*."""
        for position, piece in self.all_pieces():
            if predicate(piece):
                return position
        return None

    def pieces_exist_between(self, start: Position, end: Position) -> bool:
        """Whether any square strictly between *start* and *end* is occupied.

        The two positions must share a row, a column or a diagonal.
        """
        step = Delta(_sign(end.x - start.x), _sign(end.y - start.y))
        position = start + step
        while position != end:
            if self.piece_at(position) is not None:
                return True
            position += step
        return False

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, from_pos: Position, to_pos: Position) -> None:
        """Relocate whatever stands on *from_pos*, capturing on *to_pos*."""
        piece = self.piece_at(from_pos)
        self[to_pos] = piece
        self[from_pos] = None

    def remove_piece(self, position: Position) -> None:
        self[position] = None

    def promote_piece(self, position: Position, piece_type: PieceType) -> None:
        """Change the type of the piece on *position*, keeping color and id."""
        piece = self.piece_at(position)
        if piece is None:
            return
        self[position] = piece.promoted(piece_type)

    def copy(self) -> Board:
        b = Board()
        b._rows = [row.copy() for row in self._rows]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[PieceCode | None]]) -> Board:
        """Build a board from 8 rows of piece codes (``None`` = empty)."""
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        b = cls()
        for y, row in enumerate(rows):
            cells = list(row)
            if len(cells) != BOARD_SIZE:
                raise ValueError(f"Row {y} must have {BOARD_SIZE} cells")
            for x, code in enumerate(cells):
                if code is not None:
                    b[Position(x, y)] = Piece.from_code(code)
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls.from_rows(_INITIAL_ROWS)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        rows: list[str] = []
        for y, row in enumerate(self._rows):
            cells = [p.symbol if p is not None else "." for p in row]
            rows.append(f"{BOARD_SIZE - y} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
