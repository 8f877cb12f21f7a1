"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessvision.core.enums import PieceType, Side
from chessvision.core.errors import NotationError

# FEN character ↔ (Side, PieceType)
_CHAR_MAP: dict[str, tuple[Side, PieceType]] = {
    "P": (Side.WHITE, PieceType.PAWN),
    "N": (Side.WHITE, PieceType.KNIGHT),
    "B": (Side.WHITE, PieceType.BISHOP),
    "R": (Side.WHITE, PieceType.ROOK),
    "Q": (Side.WHITE, PieceType.QUEEN),
    "K": (Side.WHITE, PieceType.KING),
    "p": (Side.BLACK, PieceType.PAWN),
    "n": (Side.BLACK, PieceType.KNIGHT),
    "b": (Side.BLACK, PieceType.BISHOP),
    "r": (Side.BLACK, PieceType.ROOK),
    "q": (Side.BLACK, PieceType.QUEEN),
    "k": (Side.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Side, PieceType], str] = {
    (Side.WHITE, PieceType.PAWN): "♙",
    (Side.WHITE, PieceType.KNIGHT): "♘",
    (Side.WHITE, PieceType.BISHOP): "♗",
    (Side.WHITE, PieceType.ROOK): "♖",
    (Side.WHITE, PieceType.QUEEN): "♕",
    (Side.WHITE, PieceType.KING): "♔",
    (Side.BLACK, PieceType.PAWN): "♟",
    (Side.BLACK, PieceType.KNIGHT): "♞",
    (Side.BLACK, PieceType.BISHOP): "♝",
    (Side.BLACK, PieceType.ROOK): "♜",
    (Side.BLACK, PieceType.QUEEN): "♛",
    (Side.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Side, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """A side's piece as read back from a board square."""

    side: Side
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.side, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            side, ptype = _CHAR_MAP[char]
        except KeyError:
            raise NotationError(f"Invalid piece character: {char!r}") from None
        return cls(side, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.side, self.piece_type)]
