"""Vision, legal move generation, attack detection and castling."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessvision.core.bitboard import Bitboard
from chessvision.core.enums import PieceType, Side
from chessvision.core.errors import NoPieceAtSquareError
from chessvision.core.move import Castle, Move
from chessvision.core.types import (
    ALL_DIRECTIONS,
    ALL_SQUARES,
    DIAGONALS,
    LATERALS,
    Direction,
    Square,
)

if TYPE_CHECKING:
    from chessvision.core.board import Board
    from chessvision.core.piece import Piece


KNIGHT_STEPS: tuple[tuple[Direction, Direction], ...] = (
    (Direction.UP, Direction.UP_LEFT),
    (Direction.UP, Direction.UP_RIGHT),
    (Direction.DOWN, Direction.DOWN_LEFT),
    (Direction.DOWN, Direction.DOWN_RIGHT),
    (Direction.LEFT, Direction.UP_LEFT),
    (Direction.LEFT, Direction.DOWN_LEFT),
    (Direction.RIGHT, Direction.UP_RIGHT),
    (Direction.RIGHT, Direction.DOWN_RIGHT),
)

# Directions a side's pawns capture in.
PAWN_CAPTURE_DIRECTIONS: dict[Side, tuple[Direction, Direction]] = {
    Side.WHITE: (Direction.UP_LEFT, Direction.UP_RIGHT),
    Side.BLACK: (Direction.DOWN_LEFT, Direction.DOWN_RIGHT),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> dict[tuple[Square, Direction], tuple[Square, ...]]:
    rays: dict[tuple[Square, Direction], tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        for direction in ALL_DIRECTIONS:
            ray: list[Square] = []
            nxt = sq.step(direction)
            while nxt is not None:
                ray.append(nxt)
                nxt = nxt.step(direction)
            rays[(sq, direction)] = tuple(ray)
    return rays


def _build_adjacent_vision() -> dict[Square, Bitboard]:
    vision: dict[Square, Bitboard] = {}
    for sq in ALL_SQUARES:
        steps = (sq.step(d) for d in ALL_DIRECTIONS)
        vision[sq] = Bitboard.from_squares(s for s in steps if s is not None)
    return vision


def _build_knight_vision() -> dict[Square, Bitboard]:
    vision: dict[Square, Bitboard] = {}
    for sq in ALL_SQUARES:
        targets: list[Square] = []
        for first, second in KNIGHT_STEPS:
            mid = sq.step(first)
            target = mid.step(second) if mid is not None else None
            if target is not None:
                targets.append(target)
        vision[sq] = Bitboard.from_squares(targets)
    return vision


_RAYS = _build_rays()
_ADJACENT_VISION = _build_adjacent_vision()
_KNIGHT_VISION = _build_knight_vision()


class MoveGenerator:
    """Read-only rules queries over a :class:`Board`.

    Legality is decided by simulation: each candidate move is forced onto a
    copy of the board and rejected if it leaves the mover in check.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Vision -------------------------------------------------------------

    def directional_vision(self, square: Square, direction: Direction) -> Bitboard:
        """Ray from *square* up to and including the first occupied square."""
        occupied = self._board.occupied().value
        value = 0
        for sq in _RAYS[(square, direction)]:
            mask = 1 << sq.index
            value |= mask
            if occupied & mask:
                break
        return Bitboard(value)

    def diagonal_vision(self, square: Square) -> Bitboard:
        vision = Bitboard.empty()
        for direction in DIAGONALS:
            vision |= self.directional_vision(square, direction)
        return vision

    def lateral_vision(self, square: Square) -> Bitboard:
        vision = Bitboard.empty()
        for direction in LATERALS:
            vision |= self.directional_vision(square, direction)
        return vision

    def queen_vision(self, square: Square) -> Bitboard:
        return self.diagonal_vision(square) | self.lateral_vision(square)

    @staticmethod
    def adjacent_vision(square: Square) -> Bitboard:
        return _ADJACENT_VISION[square]

    @staticmethod
    def knight_vision(square: Square) -> Bitboard:
        return _KNIGHT_VISION[square]

    @staticmethod
    def immediately_diagonal_vision(
        square: Square, directions: tuple[Direction, ...] = DIAGONALS
    ) -> Bitboard:
        steps = (square.step(d) for d in directions)
        return Bitboard.from_squares(s for s in steps if s is not None)

    def vision(self, square: Square, piece: Piece) -> Bitboard:
        """Squares *piece* would see standing on *square*."""
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            return self.immediately_diagonal_vision(
                square, PAWN_CAPTURE_DIRECTIONS[piece.side]
            )
        if pt == PieceType.KNIGHT:
            return self.knight_vision(square)
        if pt == PieceType.BISHOP:
            return self.diagonal_vision(square)
        if pt == PieceType.ROOK:
            return self.lateral_vision(square)
        if pt == PieceType.QUEEN:
            return self.queen_vision(square)
        return self.adjacent_vision(square)

    def has_vision(self, source: Square, target: Square) -> bool:
        """Whether the piece on *source* sees *target*."""
        return target in self.vision(source, self._require_piece(source))

    # -- Legal moves --------------------------------------------------------

    def get_legal_moves(self, square: Square) -> list[Move]:
        """Legal moves of the piece on *square*."""
        piece = self._require_piece(square)
        legal: list[Move] = []
        for destination in self._pseudo_legal_destinations(square, piece).to_squares():
            move = Move(square, destination)
            after = self._board.get_transformation(move)
            if not MoveGenerator(after).is_in_check(piece.side):
                legal.append(move)
        return legal

    def is_legal_move(self, move: Move) -> bool:
        return move in self.get_legal_moves(move.source)

    def get_legal_moves_for_side(self, side: Side) -> list[Move]:
        moves: list[Move] = []
        for square in self._board.get_side_squares(side):
            moves.extend(self.get_legal_moves(square))
        return moves

    def _pseudo_legal_destinations(self, square: Square, piece: Piece) -> Bitboard:
        side = piece.side
        not_own = ~self._board.side_bitboard(side)
        pt = piece.piece_type

        if pt == PieceType.PAWN:
            return (
                self.get_en_passant_takes(side, square)
                | self._diagonal_takes(side, square)
                | self._forward_steps(side, square)
            )
        if pt == PieceType.KING:
            castles = Bitboard.from_squares(
                castle.king_move(side).destination
                for castle in self.get_castles(side)
                if castle.king_move(side).source == square
            )
            return (self.adjacent_vision(square) & not_own) | castles
        return self.vision(square, piece) & not_own

    def get_en_passant_takes(self, side: Side, square: Square) -> Bitboard:
        """En passant captures. Not played: always empty."""
        return Bitboard.empty()

    def _diagonal_takes(self, side: Side, square: Square) -> Bitboard:
        targets = self.immediately_diagonal_vision(
            square, PAWN_CAPTURE_DIRECTIONS[side]
        )
        return targets & self._board.side_bitboard(side.opponent)

    def _forward_steps(self, side: Side, square: Square) -> Bitboard:
        board = self._board
        one = square.step(side.forward)
        if one is None or board.is_occupied(one):
            return Bitboard.empty()
        steps = [one]
        if square.rank == side.pawn_rank:
            two = one.step(side.forward)
            if two is not None and not board.is_occupied(two):
                steps.append(two)
        return Bitboard.from_squares(steps)

    # -- Castling -----------------------------------------------------------

    def get_castles(self, side: Side) -> list[Castle]:
        """Castles *side* may play right now."""
        return [c for c in Castle if self.castle_blocker(side, c) is None]

    def castle_blocker(self, side: Side, castle: Castle) -> str | None:
        """Why *castle* is unavailable to *side*, or ``None`` if it is."""
        board = self._board
        king_from = castle.king_move(side).source
        if king_from not in board.pieces_bitboard(side, PieceType.KING):
            return f"the {side} king is not on {king_from.name}"

        rook_from = castle.rook_move(side).source
        if rook_from not in board.pieces_bitboard(side, PieceType.ROOK):
            return f"the {side} rook is not on {rook_from.name}"

        for sq in castle.between(side):
            if board.is_occupied(sq):
                return f"{sq.name} is occupied"

        for sq in castle.king_path(side):
            if self.is_attacking(side.opponent, sq):
                return f"{sq.name} is attacked"

        if not board.has_castling_right(side, castle):
            return f"{side} may no longer castle {castle.name.lower()}"
        return None

    # -- Attack detection ---------------------------------------------------

    def is_attacking(self, attacker: Side, square: Square) -> bool:
        """Is *square* attacked by any piece of *attacker*?"""
        board = self._board

        # Squares an attacking pawn would capture onto *square* from.
        pawn_origins = self.immediately_diagonal_vision(
            square, PAWN_CAPTURE_DIRECTIONS[attacker.opponent]
        )
        if pawn_origins & board.pieces_bitboard(attacker, PieceType.PAWN):
            return True

        if self.knight_vision(square) & board.pieces_bitboard(attacker, PieceType.KNIGHT):
            return True

        if self.adjacent_vision(square) & board.pieces_bitboard(attacker, PieceType.KING):
            return True

        queens = board.pieces_bitboard(attacker, PieceType.QUEEN)
        diagonal = board.pieces_bitboard(attacker, PieceType.BISHOP) | queens
        if diagonal and self.diagonal_vision(square) & diagonal:
            return True

        lateral = board.pieces_bitboard(attacker, PieceType.ROOK) | queens
        if lateral and self.lateral_vision(square) & lateral:
            return True

        return False

    def is_in_check(self, side: Side) -> bool:
        """Is any of *side*'s kings attacked by the opponent?"""
        return any(
            self.is_attacking(side.opponent, sq) for sq in self._board.king_squares(side)
        )

    def get_n_defenders(self, side: Side, square: Square) -> int:
        """How many of *side*'s pieces see *square*."""
        return sum(
            1 for sq in self._board.get_side_squares(side) if self.has_vision(sq, square)
        )

    def get_n_attackers(self, side: Side, square: Square) -> int:
        """How many of the opponent's pieces see *square*."""
        return self.get_n_defenders(side.opponent, square)

    def most_defended_squares(self, side: Side) -> list[tuple[Square, int]]:
        """Defended squares with their defender counts, most defended first."""
        counted: list[tuple[Square, int]] = []
        for sq in ALL_SQUARES:
            n = self.get_n_defenders(side, sq)
            if n:
                counted.append((sq, n))
        counted.sort(key=lambda item: item[1], reverse=True)
        return counted

    # -- Move classification ------------------------------------------------

    def is_capture(self, move: Move) -> bool:
        piece = self._require_piece(move.source)
        target = self._board.get(move.destination)
        return target is not None and target.side != piece.side

    def get_checks(self, side: Side) -> list[Move]:
        """Legal moves of *side* that put the opponent in check."""
        return [
            m
            for m in self.get_legal_moves_for_side(side)
            if MoveGenerator(self._board.get_transformation(m)).is_in_check(
                side.opponent
            )
        ]

    def get_captures(self, side: Side) -> list[Move]:
        return [m for m in self.get_legal_moves_for_side(side) if self.is_capture(m)]

    # -- Helpers ------------------------------------------------------------

    def _require_piece(self, square: Square) -> Piece:
        piece = self._board.get(square)
        if piece is None:
            raise NoPieceAtSquareError(f"There's no piece on {square.name}")
        return piece
