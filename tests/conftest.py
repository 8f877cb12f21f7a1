"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessvision.core.board import Board
from chessvision.core.enums import Side
from chessvision.core.notation import parse_move

Play = Callable[..., Side]


@pytest.fixture
def starting_board() -> Board:
    return Board.starting_position()


@pytest.fixture
def play() -> Play:
    """Play comma separated moves on a board, alternating sides.

    Returns the side to move afterwards.
    """

    def _play(board: Board, moves: str, side: Side = Side.WHITE) -> Side:
        for text in moves.split(","):
            board.make_move(parse_move(board, side, text))
            side = side.opponent
        return side

    return _play
