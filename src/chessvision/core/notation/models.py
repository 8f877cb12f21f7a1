"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessvision.core.errors import NotationError

if TYPE_CHECKING:
    from chessvision.core.board import Board
    from chessvision.core.enums import Side
    from chessvision.core.move import Move
    from chessvision.core.types import Square


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing user notation: a move or a message saying why not."""

    move: Move | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.move is not None

    def unwrap(self) -> Move:
        if self.move is None:
            raise NotationError(self.error or "No move parsed")
        return self.move


@dataclass(slots=True)
class ParsedFen:
    """Fields read back from a FEN record."""

    board: Board
    side_to_move: Side
    en_passant: Square | None
    halfmove_clock: int
    fullmove_number: int
