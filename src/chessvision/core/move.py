"""Move, castle and path value objects."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from chessvision.core.enums import CastlingRights, Side
from chessvision.core.errors import NotationError
from chessvision.core.types import File, Square


@dataclass(frozen=True, slots=True)
class Move:
    """A single relocation from *source* to *destination*.

    Piece type, capture and castling are read from the board the move is
    played on, not stored here.
    """

    source: Square
    destination: Square

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse long algebraic notation, e.g. ``'e2e4'``."""
        if len(text) != 4:
            raise NotationError(f"Invalid move: {text!r}")
        return cls(Square.from_name(text[:2]), Square.from_name(text[2:]))

    def __str__(self) -> str:
        return f"{self.source.name}{self.destination.name}"

    @property
    def uci(self) -> str:
        return str(self)


class Castle(Enum):
    KINGSIDE = "O-O"
    QUEENSIDE = "O-O-O"

    @property
    def notation(self) -> str:
        return self.value

    def king_move(self, side: Side) -> Move:
        rank = side.home_rank
        king_to = File.G if self is Castle.KINGSIDE else File.C
        return Move(Square(File.E, rank), Square(king_to, rank))

    def rook_move(self, side: Side) -> Move:
        rank = side.home_rank
        if self is Castle.KINGSIDE:
            return Move(Square(File.H, rank), Square(File.F, rank))
        return Move(Square(File.A, rank), Square(File.D, rank))

    def between(self, side: Side) -> tuple[Square, ...]:
        """Squares strictly between king and rook; all must be empty."""
        files = (File.F, File.G) if self is Castle.KINGSIDE else (File.B, File.C, File.D)
        return tuple(Square(f, side.home_rank) for f in files)

    def king_path(self, side: Side) -> tuple[Square, ...]:
        """King's current, transit and destination squares."""
        files = (
            (File.E, File.F, File.G)
            if self is Castle.KINGSIDE
            else (File.E, File.D, File.C)
        )
        return tuple(Square(f, side.home_rank) for f in files)

    def rights(self, side: Side) -> CastlingRights:
        if side is Side.WHITE:
            return (
                CastlingRights.WHITE_KINGSIDE
                if self is Castle.KINGSIDE
                else CastlingRights.WHITE_QUEENSIDE
            )
        return (
            CastlingRights.BLACK_KINGSIDE
            if self is Castle.KINGSIDE
            else CastlingRights.BLACK_QUEENSIDE
        )

    @classmethod
    def for_king_move(cls, side: Side, move: Move) -> Castle | None:
        """The castle whose king move is *move*, if any."""
        for castle in cls:
            if castle.king_move(side) == move:
                return castle
        return None


@dataclass(frozen=True, slots=True)
class Path:
    """Ordered walk of a single piece through the move graph."""

    moves: tuple[Move, ...] = ()

    def extended(self, move: Move) -> Path:
        return Path(self.moves + (move,))

    @property
    def end(self) -> Square | None:
        """Square the walk finishes on, ``None`` for the empty path."""
        return self.moves[-1].destination if self.moves else None

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __str__(self) -> str:
        return " ".join(str(m) for m in self.moves)
