"""Board - piece placement held in eight bitboards."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chessvision.core.bitboard import Bitboard
from chessvision.core.enums import CastlingRights, PieceType, Side
from chessvision.core.errors import (
    IllegalMoveError,
    NoPieceAtSquareError,
    PreconditionError,
    SquareOccupiedError,
)
from chessvision.core.move import Castle, Move
from chessvision.core.move_generator import MoveGenerator
from chessvision.core.piece import Piece
from chessvision.core.types import File, Square

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable position: side occupancy, piece-type occupancy, castling rights.

    A square is occupied when it is in exactly one side bitboard and exactly
    one piece-type bitboard. Speculative positions are explored on copies
    (:meth:`get_transformation`), never by mutating a shared board.
    """

    __slots__ = ("_side_bitboards", "_piece_bitboards", "castling", "_last_moves")

    def __init__(self, castling: CastlingRights = CastlingRights.ALL) -> None:
        # [side] -> squares occupied by that side.
        self._side_bitboards: list[Bitboard] = [Bitboard.empty(), Bitboard.empty()]
        # [piece_type-1] -> squares occupied by that piece type, either side.
        self._piece_bitboards: list[Bitboard] = [Bitboard.empty() for _ in PieceType]
        self.castling = castling
        # [side] -> last move played by that side. Nothing reads it yet:
        # en passant is not generated.
        self._last_moves: list[Move | None] = [None, None]

    @staticmethod
    def _piece_type_index(piece_type: PieceType) -> int:
        return int(piece_type) - 1

    # -- Factories ----------------------------------------------------------

    @classmethod
    def starting_position(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for file, piece_type in zip(File, _BACK_RANK):
            for side in Side:
                b.add(side, PieceType.PAWN, Square(file, side.pawn_rank))
                b.add(side, piece_type, Square(file, side.home_rank))
        return b

    @classmethod
    def single_piece(cls, side: Side, piece_type: PieceType, square: Square) -> Board:
        """Board holding nothing but one piece."""
        b = cls()
        b.add(side, piece_type, square)
        return b

    # -- Element access -----------------------------------------------------

    def add(self, side: Side, piece_type: PieceType, square: Square) -> None:
        """Place a piece on an empty square."""
        if self.is_occupied(square):
            raise SquareOccupiedError(f"{square.name} is already occupied")
        mask = Bitboard.square(square)
        self._side_bitboards[side] |= mask
        idx = self._piece_type_index(piece_type)
        self._piece_bitboards[idx] |= mask

    def get(self, square: Square) -> Piece | None:
        """Side and piece type on *square*, or ``None`` if empty."""
        if not self.is_occupied(square):
            return None
        side = Side.WHITE if square in self._side_bitboards[Side.WHITE] else Side.BLACK
        for piece_type in PieceType:
            if square in self._piece_bitboards[self._piece_type_index(piece_type)]:
                return Piece(side, piece_type)
        raise PreconditionError(f"{square.name} is occupied but holds no piece type")

    def __getitem__(self, square: Square) -> Piece | None:
        return self.get(square)

    def is_occupied(self, square: Square) -> bool:
        return square in self.occupied()

    def is_empty(self, square: Square) -> bool:
        return not self.is_occupied(square)

    # -- Bitboard views -----------------------------------------------------

    def occupied(self) -> Bitboard:
        return self._side_bitboards[Side.WHITE] | self._side_bitboards[Side.BLACK]

    def side_bitboard(self, side: Side) -> Bitboard:
        return self._side_bitboards[side]

    def piece_bitboard(self, piece_type: PieceType) -> Bitboard:
        """Squares holding *piece_type* for either side."""
        return self._piece_bitboards[self._piece_type_index(piece_type)]

    def pieces_bitboard(self, side: Side, piece_type: PieceType) -> Bitboard:
        return self._side_bitboards[side] & self.piece_bitboard(piece_type)

    # -- Query helpers ------------------------------------------------------

    def get_side_pieces(self, side: Side, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *side*'s *piece_type*."""
        return self.pieces_bitboard(side, piece_type).to_squares()

    def get_side_squares(self, side: Side) -> list[Square]:
        """All squares occupied by *side*."""
        return self._side_bitboards[side].to_squares()

    def king_squares(self, side: Side) -> list[Square]:
        return self.get_side_pieces(side, PieceType.KING)

    def has_castling_right(self, side: Side, castle: Castle) -> bool:
        return bool(self.castling & castle.rights(side))

    def last_move(self, side: Side) -> Move | None:
        return self._last_moves[side]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board(self.castling)
        b._side_bitboards = self._side_bitboards.copy()
        b._piece_bitboards = self._piece_bitboards.copy()
        b._last_moves = self._last_moves.copy()
        return b

    def transform(self, move: Move) -> None:
        """Relocate the piece on the source square, capturing on arrival.

        No legality check is made and castling rooks are not moved.
        """
        piece = self.get(move.source)
        if piece is None:
            raise NoPieceAtSquareError(f"There's no piece on {move.source.name}")

        side_idx = piece.side
        piece_idx = self._piece_type_index(piece.piece_type)
        self._side_bitboards[side_idx] = self._side_bitboards[side_idx].transform(move)
        self._piece_bitboards[piece_idx] = self._piece_bitboards[piece_idx].transform(
            move
        )
        self._disambiguate_captures(piece, move.destination)

    def _disambiguate_captures(self, mover: Piece, destination: Square) -> None:
        opponent = mover.side.opponent
        overlap = self._side_bitboards[mover.side] & self._side_bitboards[opponent]
        if overlap:
            self._side_bitboards[opponent] &= ~overlap

        # Only the mover's type may remain on the destination.
        keep = ~Bitboard.square(destination)
        mover_idx = self._piece_type_index(mover.piece_type)
        for idx, bitboard in enumerate(self._piece_bitboards):
            if idx != mover_idx:
                self._piece_bitboards[idx] = bitboard & keep

    def force_make_move(self, move: Move) -> None:
        """Apply *move* without a legality check; castling moves the rook too."""
        piece = self.get(move.source)
        if piece is None:
            raise NoPieceAtSquareError(f"There's no piece on {move.source.name}")

        castle = None
        if piece.piece_type == PieceType.KING:
            castle = Castle.for_king_move(piece.side, move)

        self.transform(move)
        if castle is not None:
            self.transform(castle.rook_move(piece.side))
        self._last_moves[piece.side] = move

    def make_move(self, move: Move) -> None:
        """Apply a legal *move*."""
        if not MoveGenerator(self).is_legal_move(move):
            raise IllegalMoveError(f"{move} is not a legal move")
        _LOGGER.debug("Playing %s", move)
        self.force_make_move(move)

    def make_moves(self, moves: Iterable[Move]) -> None:
        for move in moves:
            self.make_move(move)

    def get_transformation(self, move: Move) -> Board:
        """Copy of this board with *move* forced onto it."""
        b = self.copy()
        b.force_make_move(move)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._side_bitboards == other._side_bitboards
            and self._piece_bitboards == other._piece_bitboards
            and self.castling == other.castling
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.get(Square.from_index(rank * 8 + file))
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
