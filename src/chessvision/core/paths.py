"""Shortest move sequences for a lone piece between two squares."""

from __future__ import annotations

import logging
from collections import deque

from chessvision.core.board import Board
from chessvision.core.enums import PieceType, Side
from chessvision.core.errors import UnsupportedPieceError
from chessvision.core.move import Path
from chessvision.core.move_generator import MoveGenerator
from chessvision.core.types import Square

_LOGGER = logging.getLogger(__name__)


def shortest_paths(piece_type: PieceType, start: Square, end: Square) -> set[Path]:
    """Every minimum-length path taking *piece_type* from *start* to *end*.

    The piece walks an otherwise empty board as white. Pawns are rejected:
    their direction depends on a side, which a lone piece does not have.
    """
    if piece_type == PieceType.PAWN:
        raise UnsupportedPieceError("Shortest paths are not well defined for pawns")
    if start == end:
        return {Path()}
    if piece_type == PieceType.BISHOP and start.is_light != end.is_light:
        return set()

    board = Board.single_piece(Side.WHITE, piece_type, start)
    results: set[Path] = set()
    shortest: int | None = None
    # First BFS depth each square was reached at. A path arriving later
    # cannot be part of a shortest path.
    depth_reached: dict[Square, int] = {start: 0}
    frontier: deque[Path] = deque([Path()])
    expanded = 0

    while frontier:
        path = frontier.popleft()
        if shortest is not None and len(path) >= shortest:
            break

        current = board.copy()
        for move in path:
            current.force_make_move(move)
        square = path.end or start
        expanded += 1

        for move in MoveGenerator(current).get_legal_moves(square):
            candidate = path.extended(move)
            length = len(candidate)
            if move.destination == end:
                results.add(candidate)
                shortest = length if shortest is None else min(shortest, length)
                continue
            if depth_reached.setdefault(move.destination, length) < length:
                continue
            frontier.append(candidate)

    _LOGGER.debug(
        "%s %s->%s: %d path(s) of length %s after %d expansions",
        piece_type,
        start,
        end,
        len(results),
        shortest,
        expanded,
    )
    return results
