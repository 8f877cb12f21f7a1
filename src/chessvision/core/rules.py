"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessvision.core.enums import PieceType, Side
from chessvision.core.errors import KingCountError
from chessvision.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessvision.core.board import Board
    from chessvision.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Checkmate and stalemate only count the king's own legal moves. A side
    # whose king is boxed in but whose other pieces can move is still
    # reported stalemated.

    @staticmethod
    def is_in_check(board: Board, side: Side) -> bool:
        return MoveGenerator(board).is_in_check(side)

    @staticmethod
    def is_checkmated(board: Board, side: Side) -> bool:
        gen = MoveGenerator(board)
        king = Rules._single_king(board, side)
        return gen.is_in_check(side) and not gen.get_legal_moves(king)

    @staticmethod
    def is_stalemated(board: Board, side: Side) -> bool:
        gen = MoveGenerator(board)
        king = Rules._single_king(board, side)
        return not gen.is_in_check(side) and not gen.get_legal_moves(king)

    @staticmethod
    def _single_king(board: Board, side: Side) -> Square:
        kings = board.get_side_pieces(side, PieceType.KING)
        if len(kings) != 1:
            raise KingCountError(f"{side} has {len(kings)} kings, expected exactly 1")
        return kings[0]
