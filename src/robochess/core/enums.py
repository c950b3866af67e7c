"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color.

    Board rows grow from black's side (``y = 0``) toward white's side
    (``y = 7``), so white pawns advance toward decreasing ``y``.
    """

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_rank(self) -> int:
        """Row holding the king and rooks at the start of the game."""
        return 7 if self == Color.WHITE else 0

    @property
    def pawn_rank(self) -> int:
        """Row from which pawns may make a two-square advance."""
        return 6 if self == Color.WHITE else 1

    @property
    def promotion_rank(self) -> int:
        return 0 if self == Color.WHITE else 7

    @property
    def forward(self) -> int:
        """Row delta of a single pawn step."""
        return -1 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def material(self) -> int:
        """Conventional material value (the king is not counted)."""
        return _MATERIAL[self]

    def __str__(self) -> str:
        return self.name.lower()


_MATERIAL: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


class GameState(IntEnum):
    """Situation of the side to move. Always derived, never stored."""

    IDLE = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()

    @property
    def is_over(self) -> bool:
        return self in (GameState.CHECKMATE, GameState.STALEMATE)
