"""Piece value object and piece codec helpers."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from minitchess.core.enums import Color, PieceType

# Notation character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

# Centipawns. The king is never traded through this table.
MATERIAL_VALUES: MappingProxyType[PieceType, int] = MappingProxyType(
    {
        PieceType.PAWN: 100,
        PieceType.KNIGHT: 320,
        PieceType.BISHOP: 330,
        PieceType.ROOK: 500,
        PieceType.QUEEN: 900,
    }
)

# Queen is not a promotion option in this variant.
PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Notation character (uppercase = white, lowercase = black)."""
        return _CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a notation character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def value(self) -> int:
        return material_value(self.piece_type)


# ── Codec helpers ────────────────────────────────────────────────────────────


def color_of(piece: Piece | None) -> Color | None:
    """Color of *piece*, or ``None`` for an empty square."""
    return None if piece is None else piece.color


def type_of(piece: Piece | None) -> PieceType | None:
    """Type of *piece*, or ``None`` for an empty square."""
    return None if piece is None else piece.piece_type


def are_enemies(first: Piece | None, second: Piece | None) -> bool:
    if first is None or second is None:
        return False
    return first.color != second.color


def material_value(piece_type: PieceType) -> int:
    """Material value in centipawns; 0 for the king."""
    return MATERIAL_VALUES.get(piece_type, 0)


def promotion_choices(color: Color) -> list[Piece]:
    """Pieces a *color* pawn may promote to (rook, knight, bishop)."""
    return [Piece(color, pt) for pt in PROMOTION_TYPES]
