"""Tests for Rules (check, checkmate, stalemate)."""

import pytest

from chessvision.core.board import Board
from chessvision.core.enums import PieceType, Side
from chessvision.core.errors import KingCountError, PreconditionError
from chessvision.core.notation import board_from_fen
from chessvision.core.rules import Rules
from chessvision.core.types import E1, E8, H1


def fen_board(fen: str) -> Board:
    return board_from_fen(fen).board


class TestCheck:
    def test_start_no_check(self, starting_board: Board) -> None:
        assert not Rules.is_in_check(starting_board, Side.WHITE)
        assert not Rules.is_in_check(starting_board, Side.BLACK)

    def test_in_check_not_mated(self) -> None:
        board = fen_board("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert Rules.is_in_check(board, Side.WHITE)
        assert not Rules.is_checkmated(board, Side.WHITE)
        assert not Rules.is_stalemated(board, Side.WHITE)


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = fen_board("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3")
        assert Rules.is_checkmated(board, Side.WHITE)
        assert not Rules.is_checkmated(board, Side.BLACK)

    def test_back_rank_mate(self) -> None:
        board = fen_board("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert Rules.is_checkmated(board, Side.BLACK)

    def test_counts_only_king_moves(self) -> None:
        # The rook on b2 could block on b1, but the king has nowhere to go.
        board = fen_board("7k/8/8/8/8/8/1R4PP/r6K w - - 0 1")
        assert Rules.is_checkmated(board, Side.WHITE)


class TestStalemate:
    def test_queen_stalemate(self) -> None:
        board = fen_board("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert Rules.is_stalemated(board, Side.BLACK)
        assert not Rules.is_checkmated(board, Side.BLACK)

    def test_counts_only_king_moves(self) -> None:
        board = fen_board("7k/8/5KQ1/8/8/8/p7/8 b - - 0 1")
        assert Rules.is_stalemated(board, Side.BLACK)

    def test_boxed_in_king_at_start(self, starting_board: Board) -> None:
        # Own pieces surround the king, so it has no moves of its own.
        assert Rules.is_stalemated(starting_board, Side.WHITE)


class TestKingCount:
    def test_missing_king(self) -> None:
        board = Board.single_piece(Side.WHITE, PieceType.KING, E1)
        with pytest.raises(KingCountError, match="Black has 0 kings"):
            Rules.is_checkmated(board, Side.BLACK)

    def test_two_kings(self) -> None:
        board = Board.single_piece(Side.WHITE, PieceType.KING, E1)
        board.add(Side.WHITE, PieceType.KING, H1)
        board.add(Side.BLACK, PieceType.KING, E8)
        with pytest.raises(PreconditionError):
            Rules.is_stalemated(board, Side.WHITE)
