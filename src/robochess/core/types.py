"""Board coordinates and displacement arithmetic.

Board layout (row-major, black at the top)::

    y=0   a8 b8 c8 d8 e8 f8 g8 h8
    ...
    y=7   a1 b1 c1 d1 e1 f1 g1 h1
          x=0                  x=7
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Delta:
    """Displacement between two positions."""

    x: int
    y: int


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Square on the board addressed by column ``x`` and row ``y``."""

    x: int
    y: int

    def __sub__(self, other: Position) -> Delta:
        if not isinstance(other, Position):
            return NotImplemented
        return Delta(self.x - other.x, self.y - other.y)

    def __add__(self, delta: Delta) -> Position:
        if not isinstance(delta, Delta):
            return NotImplemented
        return Position(self.x + delta.x, self.y + delta.y)

    @property
    def is_on_board(self) -> bool:
        return 0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE

    def __str__(self) -> str:
        return square_name(self) if self.is_on_board else f"({self.x}, {self.y})"


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(x, y) for y in range(BOARD_SIZE) for x in range(BOARD_SIZE)
)


def square_name(position: Position) -> str:
    """Algebraic name, e.g. ``Position(4, 6)`` -> ``'e2'``."""
    return chr(ord("a") + position.x) + str(BOARD_SIZE - position.y)


def parse_square(name: str) -> Position:
    """Parse an algebraic square name, e.g. ``'e2'`` -> ``Position(4, 6)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Position(ord(name[0]) - ord("a"), BOARD_SIZE - int(name[1]))
