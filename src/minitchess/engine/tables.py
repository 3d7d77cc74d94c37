"""Static evaluation tables and the opening book.

Piece-square tables are indexed ``[row][col]`` from White's side (row 0 is
White's home rank). Black reads the same table mirrored: ``[5 - row][col]``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

from minitchess.core.enums import Color, PieceType
from minitchess.core.types import Square

PieceSquareTable = tuple[tuple[int, ...], ...]

# Used only to rank captures during move ordering.
KING_ORDER_VALUE = 20_000


class OpeningMove(NamedTuple):
    from_sq: Square
    to_sq: Square


PIECE_SQUARE_TABLES: MappingProxyType[PieceType, PieceSquareTable] = MappingProxyType(
    {
        PieceType.PAWN: (
            (0, 0, 0, 0, 0),
            (50, 50, 50, 50, 50),
            (10, 10, 20, 10, 10),
            (5, 5, 10, 5, 5),
            (0, 0, 0, 0, 0),
            (0, 0, 0, 0, 0),
        ),
        PieceType.KNIGHT: (
            (-50, -40, -30, -40, -50),
            (-40, -20, 0, -20, -40),
            (-30, 0, 10, 0, -30),
            (-30, 5, 15, 5, -30),
            (-40, -20, 0, -20, -40),
            (-50, -40, -30, -40, -50),
        ),
        PieceType.BISHOP: (
            (-20, -10, -10, -10, -20),
            (-10, 0, 0, 0, -10),
            (-10, 0, 10, 0, -10),
            (-10, 5, 5, 5, -10),
            (-10, 0, 0, 0, -10),
            (-20, -10, -10, -10, -20),
        ),
        PieceType.ROOK: (
            (0, 0, 0, 0, 0),
            (5, 10, 10, 10, 5),
            (-5, 0, 0, 0, -5),
            (-5, 0, 0, 0, -5),
            (0, 0, 0, 0, 0),
            (0, 0, 5, 0, 0),
        ),
        PieceType.QUEEN: (
            (-20, -10, -10, -10, -20),
            (-10, 0, 0, 0, -10),
            (-10, 0, 10, 0, -10),
            (-10, 0, 5, 0, -10),
            (-10, 0, 0, 0, -10),
            (-20, -10, -10, -10, -20),
        ),
        PieceType.KING: (
            (-30, -40, -40, -40, -30),
            (-30, -40, -40, -40, -30),
            (-20, -30, -30, -30, -20),
            (-10, -20, -20, -20, -10),
            (20, 20, 0, 20, 20),
            (20, 30, 10, 30, 20),
        ),
    }
)

# Tried in order while the game is young; illegal entries are skipped.
OPENING_MOVES: MappingProxyType[Color, tuple[OpeningMove, ...]] = MappingProxyType(
    {
        Color.WHITE: (
            OpeningMove(Square(1, 2), Square(3, 2)),  # c2-c4
            OpeningMove(Square(1, 1), Square(3, 1)),  # b2-b4
            OpeningMove(Square(1, 3), Square(3, 3)),  # d2-d4
            OpeningMove(Square(0, 1), Square(2, 2)),  # Nb1-c3
            OpeningMove(Square(0, 3), Square(2, 2)),  # Qd1-c3
        ),
        Color.BLACK: (
            OpeningMove(Square(4, 2), Square(2, 2)),  # c5-c3
            OpeningMove(Square(4, 1), Square(2, 1)),  # b5-b3
            OpeningMove(Square(4, 3), Square(2, 3)),  # d5-d3
            OpeningMove(Square(5, 3), Square(3, 2)),  # Nd6-c4
            OpeningMove(Square(5, 1), Square(3, 2)),  # Qb6-c4
        ),
    }
)
