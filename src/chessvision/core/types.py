"""Board coordinates: files, ranks, squares and step directions.

Square indexes use the Little-Endian Rank-File mapping:
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum

from chessvision.core.errors import NotationError

_FILE_CHARS = "abcdefgh"
_RANK_CHARS = "12345678"


class File(IntEnum):
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    def previous(self) -> File | None:
        return None if self is File.A else File(self - 1)

    def next(self) -> File | None:
        return None if self is File.H else File(self + 1)

    @property
    def char(self) -> str:
        return _FILE_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> File:
        idx = _FILE_CHARS.find(char.lower()) if len(char) == 1 else -1
        if idx < 0:
            raise NotationError(f"Invalid file: {char!r}")
        return cls(idx)


class Rank(IntEnum):
    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7

    def previous(self) -> Rank | None:
        return None if self is Rank.ONE else Rank(self - 1)

    def next(self) -> Rank | None:
        return None if self is Rank.EIGHT else Rank(self + 1)

    @property
    def char(self) -> str:
        return _RANK_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> Rank:
        idx = _RANK_CHARS.find(char) if len(char) == 1 else -1
        if idx < 0:
            raise NotationError(f"Invalid rank: {char!r}")
        return cls(idx)


class Direction(Enum):
    """Single king-step directions as (file delta, rank delta)."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP_LEFT = (-1, 1)
    UP_RIGHT = (1, 1)
    DOWN_LEFT = (-1, -1)
    DOWN_RIGHT = (1, -1)

    @property
    def file_delta(self) -> int:
        return self.value[0]

    @property
    def rank_delta(self) -> int:
        return self.value[1]


DIAGONALS: tuple[Direction, ...] = (
    Direction.UP_LEFT,
    Direction.UP_RIGHT,
    Direction.DOWN_LEFT,
    Direction.DOWN_RIGHT,
)
LATERALS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)
ALL_DIRECTIONS: tuple[Direction, ...] = LATERALS + DIAGONALS


def _step_file(file: File, delta: int) -> File | None:
    if delta > 0:
        return file.next()
    if delta < 0:
        return file.previous()
    return file


def _step_rank(rank: Rank, delta: int) -> Rank | None:
    if delta > 0:
        return rank.next()
    if delta < 0:
        return rank.previous()
    return rank


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable (file, rank) coordinate."""

    file: File
    rank: Rank

    @classmethod
    def from_name(cls, name: str) -> Square:
        """Parse a square name, e.g. ``'e4'``."""
        if len(name) != 2:
            raise NotationError(f"Invalid square name: {name!r}")
        return cls(File.from_char(name[0]), Rank.from_char(name[1]))

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not 0 <= index < 64:
            raise ValueError(f"Square index out of range: {index}")
        return cls(File(index & 7), Rank(index >> 3))

    @property
    def name(self) -> str:
        return self.file.char + self.rank.char

    @property
    def index(self) -> int:
        return self.rank * 8 + self.file

    @property
    def is_light(self) -> bool:
        return (self.file + self.rank) % 2 == 1

    def step(self, direction: Direction) -> Square | None:
        """Neighbouring square in *direction*, or ``None`` past the edge."""
        file = _step_file(self.file, direction.file_delta)
        rank = _step_rank(self.rank, direction.rank_delta)
        if file is None or rank is None:
            return None
        return Square(file, rank)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Square({self.name})"


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(file, rank) for file in File for rank in Rank
)

_SQUARE_LIST_SPLIT = re.compile(r"[\s,]+")


def parse_squares(text: str) -> list[Square]:
    """Parse a comma or whitespace separated list of square names."""
    names = [name for name in _SQUARE_LIST_SPLIT.split(text.strip()) if name]
    if not names:
        raise NotationError("Expected at least one square")
    squares: list[Square] = []
    for name in names:
        try:
            squares.append(Square.from_name(name))
        except NotationError:
            raise NotationError(f"{name!r} is not a valid square") from None
    return squares


def squares_to_string(squares: list[Square]) -> str:
    return ", ".join(sq.name for sq in sorted(squares))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, Rank.ONE) for f in File)
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, Rank.TWO) for f in File)
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, Rank.THREE) for f in File)
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, Rank.FOUR) for f in File)
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, Rank.FIVE) for f in File)
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, Rank.SIX) for f in File)
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, Rank.SEVEN) for f in File)
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, Rank.EIGHT) for f in File)
