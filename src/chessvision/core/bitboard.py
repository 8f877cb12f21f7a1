"""Bitboard: an immutable 64-bit set of squares."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from chessvision.core.errors import EmptySourceError
from chessvision.core.move import Move
from chessvision.core.types import ALL_SQUARES, File, Rank, Square

_FULL = (1 << 64) - 1
_RANK_1 = 0xFF
_FILE_A = 0x0101010101010101


@dataclass(frozen=True, slots=True)
class Bitboard:
    """Set of squares packed into an int, bit index ``rank * 8 + file``."""

    value: int = 0

    # -- Construction -------------------------------------------------------

    @classmethod
    def empty(cls) -> Bitboard:
        return cls(0)

    @classmethod
    def full(cls) -> Bitboard:
        return cls(_FULL)

    @classmethod
    def rank(cls, rank: Rank) -> Bitboard:
        return cls(_RANK_1 << (8 * rank))

    @classmethod
    def file(cls, file: File) -> Bitboard:
        return cls(_FILE_A << file)

    @classmethod
    def square(cls, square: Square) -> Bitboard:
        return cls.file(square.file) & cls.rank(square.rank)

    @classmethod
    def from_squares(cls, squares: Iterable[Square]) -> Bitboard:
        value = 0
        for sq in squares:
            value |= 1 << sq.index
        return cls(value)

    # -- Queries ------------------------------------------------------------

    def to_squares(self) -> list[Square]:
        """Member squares, file-major then rank (a1, a2, ..., h8)."""
        value = self.value
        return [sq for sq in ALL_SQUARES if value >> sq.index & 1]

    def is_occupied(self, square: Square) -> bool:
        return (self & Bitboard.square(square)).has_pieces()

    def has_pieces(self) -> bool:
        return self.value != 0

    def is_empty(self) -> bool:
        return self.value == 0

    def count(self) -> int:
        return self.value.bit_count()

    # -- Transformation -----------------------------------------------------

    def transform(self, move: Move) -> Bitboard:
        """Relocate the source bit to the destination."""
        if not self.is_occupied(move.source):
            raise EmptySourceError(
                f"Cannot move from {move.source.name}: square not in bitboard"
            )
        cleared = self.value & ~(1 << move.source.index)
        return Bitboard(cleared | 1 << move.destination.index)

    # -- Operators ----------------------------------------------------------

    def __and__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.value & other.value)

    def __or__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.value | other.value)

    def __invert__(self) -> Bitboard:
        return Bitboard(~self.value & _FULL)

    def __bool__(self) -> bool:
        return self.has_pieces()

    def __contains__(self, square: Square) -> bool:
        return self.is_occupied(square)

    def __str__(self) -> str:
        rows: list[str] = []
        for rank in reversed(Rank):
            cells = ["1" if Square(f, rank) in self else "." for f in File]
            rows.append(f"{rank.char} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
