"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from robochess.core.types import Position, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (from, to) pair. Equality is structural."""

    from_pos: Position
    to_pos: Position

    @property
    def reversed(self) -> Move:
        return Move(self.to_pos, self.from_pos)

    def __str__(self) -> str:
        return f"{square_name(self.from_pos)}{square_name(self.to_pos)}"
