"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from robochess.core.enums import Color, PieceType

# Code character -> value
_COLOR_CHARS: dict[str, Color] = {
    "W": Color.WHITE,
    "B": Color.BLACK,
}

_TYPE_CHARS: dict[str, PieceType] = {
    "P": PieceType.PAWN,
    "R": PieceType.ROOK,
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}

_TYPE_SYMBOLS: dict[PieceType, str] = {v: k for k, v in _TYPE_CHARS.items()}

_CODE_LENGTH = 3


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable chess piece carrying a stable identity.

    ``id`` is the three-character code the piece was created from, e.g.
    ``"WN6"``.  It never changes, not even on promotion, so presentation
    code can track a piece across moves.  Rules logic only looks at
    ``color`` and ``piece_type``.
    """

    id: str
    color: Color
    piece_type: PieceType

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_code(cls, code: str) -> Piece:
        """Create a piece from a code such as ``'BQ3'`` (black queen)."""
        if len(code) != _CODE_LENGTH:
            raise ValueError(f"Invalid piece code: {code!r}")
        try:
            color = _COLOR_CHARS[code[0]]
            ptype = _TYPE_CHARS[code[1]]
        except KeyError:
            raise ValueError(f"Invalid piece code: {code!r}") from None
        return cls(code, color, ptype)

    def promoted(self, piece_type: PieceType) -> Piece:
        """Same piece (color and id) with a new type."""
        return replace(self, piece_type=piece_type)

    # ── Derived attributes ───────────────────────────────────────────────

    @property
    def material(self) -> int:
        return self.piece_type.material

    @property
    def image_name(self) -> str:
        """Sprite name used by renderers, e.g. ``'knight_black'``."""
        return f"{self.piece_type.name.lower()}_{self.color.name.lower()}"

    @property
    def symbol(self) -> str:
        """Letter of the current type, uppercase for white, e.g. 'n'."""
        char = _TYPE_SYMBOLS[self.piece_type]
        return char if self.color == Color.WHITE else char.lower()

    def __str__(self) -> str:
        return self.id
