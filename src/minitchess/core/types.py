"""Square type and coordinate helpers.

Board layout (row 0 is White's home rank)::

    row 5   a6 b6 c6 d6 e6
    ...
    row 0   a1 b1 c1 d1 e1

Columns map to files ``a``-``e``, rows map to ranks ``1``-``6``.
"""

from __future__ import annotations

from typing import NamedTuple

ROWS = 6
COLS = 5

_FILES = "abcde"
_RANKS = "123456"


class Square(NamedTuple):
    """A ``(row, col)`` coordinate. May lie off the board."""

    row: int
    col: int

    @property
    def name(self) -> str:
        return square_name(self)

    def __str__(self) -> str:
        return square_name(self)


def is_valid_square(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 6x5 board."""
    return 0 <= row < ROWS and 0 <= col < COLS


def make_square(row: int, col: int) -> Square:
    """Create a square from row (0-5) and col (0-4)."""
    return Square(row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``(0, 0)`` -> ``'a1'``. Empty if off-board."""
    if not is_valid_square(sq.row, sq.col):
        return ""
    return _FILES[sq.col] + _RANKS[sq.row]


def parse_square(name: str) -> Square:
    """Parse a square name, e.g. ``'c4'`` -> ``Square(3, 2)``."""
    if len(name) != 2 or name[0].lower() not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(_RANKS.index(name[1]), _FILES.index(name[0].lower()))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(ROWS) for col in range(COLS)
)

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1 = (Square(0, c) for c in range(COLS))
A2, B2, C2, D2, E2 = (Square(1, c) for c in range(COLS))
A3, B3, C3, D3, E3 = (Square(2, c) for c in range(COLS))
A4, B4, C4, D4, E4 = (Square(3, c) for c in range(COLS))
A5, B5, C5, D5, E5 = (Square(4, c) for c in range(COLS))
A6, B6, C6, D6, E6 = (Square(5, c) for c in range(COLS))
