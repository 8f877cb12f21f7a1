"""Tests for shortest_paths."""

import pytest

from chessvision.core.enums import PieceType
from chessvision.core.errors import UnsupportedPieceError
from chessvision.core.move import Move, Path
from chessvision.core.paths import shortest_paths
from chessvision.core.types import (
    A1, A3, B2, B3, C1, C3, E3, F7, G2, G8, H2, H8,
)


class TestShortestPaths:
    def test_same_square_is_empty_path(self) -> None:
        assert shortest_paths(PieceType.ROOK, E3, E3) == {Path()}

    def test_rook_two_routes(self) -> None:
        assert shortest_paths(PieceType.ROOK, G2, H8) == {
            Path((Move(G2, H2), Move(H2, H8))),
            Path((Move(G2, G8), Move(G8, H8))),
        }

    def test_bishop_wrong_colour(self) -> None:
        assert shortest_paths(PieceType.BISHOP, A3, F7) == set()

    def test_bishop_same_colour(self) -> None:
        assert shortest_paths(PieceType.BISHOP, A1, A3) == {
            Path((Move(A1, B2), Move(B2, A3))),
        }

    def test_queen_single_move(self) -> None:
        assert shortest_paths(PieceType.QUEEN, A1, H8) == {Path((Move(A1, H8),))}

    def test_king_diagonal(self) -> None:
        assert shortest_paths(PieceType.KING, A1, C3) == {
            Path((Move(A1, B2), Move(B2, C3))),
        }

    def test_knight_from_corner(self) -> None:
        assert shortest_paths(PieceType.KNIGHT, A1, C1) == {
            Path((Move(A1, B3), Move(B3, C1))),
        }

    def test_knight_corner_to_corner(self) -> None:
        paths = shortest_paths(PieceType.KNIGHT, A1, H8)
        assert paths
        for path in paths:
            assert len(path) == 6
            moves = list(path)
            assert moves[0].source == A1
            assert path.end == H8
            for prev, nxt in zip(moves, moves[1:]):
                assert prev.destination == nxt.source

    def test_pawn_rejected(self) -> None:
        with pytest.raises(UnsupportedPieceError, match="pawns"):
            shortest_paths(PieceType.PAWN, A1, A3)


class TestPath:
    def test_extended_and_end(self) -> None:
        path = Path().extended(Move(A1, B2))
        assert len(path) == 1
        assert path.end == B2
        assert Path().end is None
        assert str(path.extended(Move(B2, C3))) == "a1b2 b2c3"
