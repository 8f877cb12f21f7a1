"""Tests for Board."""

import pytest

from chessvision.core.board import Board
from chessvision.core.enums import CastlingRights, PieceType, Side
from chessvision.core.errors import (
    IllegalMoveError,
    NoPieceAtSquareError,
    SquareOccupiedError,
)
from chessvision.core.move import Move
from chessvision.core.piece import Piece
from chessvision.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4, E5, H2,
    ALL_SQUARES,
)


def assert_consistent(board: Board) -> None:
    """Each occupied square is in one side and one piece-type bitboard."""
    white = board.side_bitboard(Side.WHITE)
    black = board.side_bitboard(Side.BLACK)
    assert (white & black).is_empty()
    for sq in ALL_SQUARES:
        holders = [pt for pt in PieceType if sq in board.piece_bitboard(pt)]
        assert len(holders) == (1 if board.is_occupied(sq) else 0), sq


class TestBoardInitial:
    def test_piece_count(self, starting_board: Board) -> None:
        assert len(starting_board.get_side_squares(Side.WHITE)) == 16
        assert len(starting_board.get_side_squares(Side.BLACK)) == 16
        assert starting_board.occupied().count() == 32

    def test_white_back_rank(self, starting_board: Board) -> None:
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert starting_board.get(sq) == Piece(Side.WHITE, pt), f"Mismatch at {sq}"

    def test_black_back_rank(self, starting_board: Board) -> None:
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert starting_board.get(sq) == Piece(Side.BLACK, pt), f"Mismatch at {sq}"

    def test_exact_piece_squares(self, starting_board: Board) -> None:
        assert starting_board.get_side_pieces(Side.WHITE, PieceType.ROOK) == [A1, H1]
        assert starting_board.get_side_pieces(Side.BLACK, PieceType.KNIGHT) == [B8, G8]
        assert starting_board.king_squares(Side.BLACK) == [E8]

    def test_pawns(self, starting_board: Board) -> None:
        white = starting_board.get_side_pieces(Side.WHITE, PieceType.PAWN)
        black = starting_board.get_side_pieces(Side.BLACK, PieceType.PAWN)
        assert len(white) == 8 and all(sq.rank == Side.WHITE.pawn_rank for sq in white)
        assert len(black) == 8 and all(sq.rank == Side.BLACK.pawn_rank for sq in black)

    def test_empty_middle(self, starting_board: Board) -> None:
        for sq in ALL_SQUARES:
            if 2 <= sq.rank <= 5:
                assert starting_board.get(sq) is None

    def test_castling_rights(self, starting_board: Board) -> None:
        assert starting_board.castling == CastlingRights.ALL

    def test_consistent(self, starting_board: Board) -> None:
        assert_consistent(starting_board)


class TestBoardOperations:
    def test_add_and_get(self) -> None:
        board = Board()
        board.add(Side.WHITE, PieceType.PAWN, E4)
        assert board[E4] == Piece(Side.WHITE, PieceType.PAWN)
        assert board.is_empty(E2)

    def test_add_occupied_raises(self) -> None:
        board = Board.single_piece(Side.WHITE, PieceType.PAWN, E4)
        with pytest.raises(SquareOccupiedError, match="e4"):
            board.add(Side.BLACK, PieceType.KNIGHT, E4)

    def test_copy_independence(self, starting_board: Board) -> None:
        copy = starting_board.copy()
        assert starting_board == copy
        copy.transform(Move(E2, E4))
        assert starting_board != copy
        assert starting_board[E2] == Piece(Side.WHITE, PieceType.PAWN)

    def test_get_transformation_leaves_board(self, starting_board: Board) -> None:
        after = starting_board.get_transformation(Move(E2, E4))
        assert after[E4] == Piece(Side.WHITE, PieceType.PAWN)
        assert starting_board[E4] is None

    def test_transform_captures(self) -> None:
        board = Board()
        board.add(Side.WHITE, PieceType.ROOK, A1)
        board.add(Side.BLACK, PieceType.KNIGHT, A8)
        board.transform(Move(A1, A8))
        assert board[A8] == Piece(Side.WHITE, PieceType.ROOK)
        assert board.get_side_squares(Side.BLACK) == []
        assert board.piece_bitboard(PieceType.KNIGHT).is_empty()
        assert_consistent(board)

    def test_transform_empty_square_raises(self) -> None:
        with pytest.raises(NoPieceAtSquareError, match="e4"):
            Board().transform(Move(E4, E5))

    def test_force_make_move_castles_rook(self) -> None:
        board = Board()
        board.add(Side.WHITE, PieceType.KING, E1)
        board.add(Side.WHITE, PieceType.ROOK, H1)
        board.force_make_move(Move(E1, G1))
        assert board[G1] == Piece(Side.WHITE, PieceType.KING)
        assert board[F1] == Piece(Side.WHITE, PieceType.ROOK)
        assert board[H1] is None

    def test_last_move_recorded(self, starting_board: Board) -> None:
        starting_board.make_move(Move(E2, E4))
        assert starting_board.last_move(Side.WHITE) == Move(E2, E4)
        assert starting_board.last_move(Side.BLACK) is None

    def test_make_illegal_move_raises(self, starting_board: Board) -> None:
        with pytest.raises(IllegalMoveError):
            starting_board.make_move(Move(E2, E5))
        assert starting_board == Board.starting_position()

    def test_make_moves_keeps_invariant(self, starting_board: Board, play) -> None:
        play(starting_board, "e4,d5,ed5,Qd5,Nc3,Qa5,d4,c6,Nf3,Bg4,Bc4,e6,O-O")
        assert starting_board[G1] == Piece(Side.WHITE, PieceType.KING)
        assert starting_board[F1] == Piece(Side.WHITE, PieceType.ROOK)
        assert starting_board.occupied().count() == 30
        assert_consistent(starting_board)

    def test_castling_rights_not_revoked(self) -> None:
        board = Board()
        board.add(Side.WHITE, PieceType.KING, E1)
        board.add(Side.WHITE, PieceType.ROOK, H1)
        board.force_make_move(Move(H1, H2))
        board.force_make_move(Move(H2, H1))
        assert board.castling == CastlingRights.ALL

    def test_repr_not_empty(self, starting_board: Board) -> None:
        text = repr(starting_board)
        assert "K" in text
        assert "a b c d e f g h" in text
        assert text.splitlines()[0] == "8 r n b q k b n r"
