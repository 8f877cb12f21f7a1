"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto

from chessvision.core.errors import NotationError
from chessvision.core.types import Direction, Rank


class Side(IntEnum):
    """Side to play a piece."""

    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> Direction:
        """Direction in which this side's pawns advance."""
        return Direction.UP if self is Side.WHITE else Direction.DOWN

    @property
    def backward(self) -> Direction:
        return Direction.DOWN if self is Side.WHITE else Direction.UP

    @property
    def home_rank(self) -> Rank:
        return Rank.ONE if self is Side.WHITE else Rank.EIGHT

    @property
    def pawn_rank(self) -> Rank:
        """Rank the pawns start on."""
        return Rank.TWO if self is Side.WHITE else Rank.SEVEN

    def __str__(self) -> str:
        return self.name.capitalize()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Uppercase algebraic letter (``'P'`` for pawns)."""
        return _LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> PieceType:
        try:
            return _FROM_LETTER[letter.upper()]
        except KeyError:
            raise NotationError(f"Invalid piece letter: {letter!r}") from None

    def __str__(self) -> str:
        return self.name.capitalize()


_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_FROM_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH
