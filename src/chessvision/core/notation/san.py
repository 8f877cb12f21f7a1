"""Short algebraic notation: parsing user input and printing moves.

Accepted input, tried in this order:

1. ``e4``    pawn advance, the pawn is found behind the destination
2. ``fe5``   pawn capture from the given file
3. ``Nf3``   piece move
4. ``Rab8``  piece move narrowed by source file or rank (``Q4d4``)
5. ``O-O`` / ``O-O-O`` castling (``0-0`` spellings accepted)

Capture and check decorations (``x``, ``+``, ``#``) are ignored.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING

from chessvision.core.bitboard import Bitboard
from chessvision.core.enums import PieceType, Side
from chessvision.core.errors import (
    DisambiguationError,
    IllegalMoveError,
    NoPieceAtSquareError,
    NotationError,
)
from chessvision.core.move import Castle, Move
from chessvision.core.move_generator import MoveGenerator
from chessvision.core.notation.models import ParseResult
from chessvision.core.types import File, Rank, Square

if TYPE_CHECKING:
    from chessvision.core.board import Board

_LOGGER = logging.getLogger(__name__)

_DECORATIONS = re.compile(r"[x+#!?\s]")
_MAX_CANDIDATES = 2

_Handler = Callable[["Board", Side, "re.Match[str]"], Move]


def _square(file_char: str, rank_char: str) -> Square:
    return Square(File.from_char(file_char), Rank.from_char(rank_char))


def _pawn_behind(board: Board, side: Side, square: Square) -> Square:
    """Find the *side* pawn one, or over an empty square two, ranks behind."""
    pawns = board.pieces_bitboard(side, PieceType.PAWN)
    one_back = square.step(side.backward)
    if one_back is None:
        raise NotationError(f"No {side} pawn can reach {square.name}")
    if one_back in pawns:
        return one_back
    if board.is_empty(one_back):
        two_back = one_back.step(side.backward)
        if two_back is not None and two_back in pawns:
            return two_back
    raise NotationError(f"There's no {side} pawn behind {square.name}")


def _sources(board: Board, side: Side, piece_type: PieceType, target: Square) -> list[Square]:
    """*side*'s pieces of *piece_type* that see *target*."""
    gen = MoveGenerator(board)
    return [
        sq for sq in board.get_side_pieces(side, piece_type) if gen.has_vision(sq, target)
    ]


def _resolve_piece_move(
    board: Board,
    side: Side,
    piece_type: PieceType,
    destination: Square,
    within: Bitboard,
) -> Move:
    if destination in board.side_bitboard(side):
        raise NotationError(f"{destination.name} is occupied by a {side} piece")

    candidates = [
        sq for sq in _sources(board, side, piece_type, destination) if sq in within
    ]
    if not candidates:
        raise NotationError(
            f"No {side} {str(piece_type).lower()} can move to {destination.name}"
        )
    if len(candidates) > _MAX_CANDIDATES:
        names = ", ".join(sq.name for sq in candidates)
        raise NotationError(
            f"Ambiguous move: {str(piece_type).lower()}s on {names} "
            f"all reach {destination.name}"
        )
    return Move(candidates[0], destination)


# -- Grammar handlers -------------------------------------------------------


def _parse_pawn_advance(board: Board, side: Side, match: re.Match[str]) -> Move:
    destination = _square(match[1], match[2])
    if board.is_occupied(destination):
        raise NotationError(f"{destination.name} is occupied, a pawn can't advance there")
    return Move(_pawn_behind(board, side, destination), destination)


def _parse_pawn_capture(board: Board, side: Side, match: re.Match[str]) -> Move:
    destination = _square(match[2], match[3])
    seed = Square(File.from_char(match[1]), destination.rank)
    return Move(_pawn_behind(board, side, seed), destination)


def _parse_piece_move(board: Board, side: Side, match: re.Match[str]) -> Move:
    piece_type = PieceType.from_letter(match[1])
    destination = _square(match[2], match[3])
    return _resolve_piece_move(board, side, piece_type, destination, Bitboard.full())


def _parse_disambiguated_piece_move(
    board: Board, side: Side, match: re.Match[str]
) -> Move:
    piece_type = PieceType.from_letter(match[1])
    hint = match[2]
    within = (
        Bitboard.rank(Rank.from_char(hint))
        if hint.isdigit()
        else Bitboard.file(File.from_char(hint))
    )
    destination = _square(match[3], match[4])
    return _resolve_piece_move(board, side, piece_type, destination, within)


def _parse_castle(board: Board, side: Side, match: re.Match[str]) -> Move:
    castle = Castle.QUEENSIDE if match[0].count("-") == 2 else Castle.KINGSIDE
    blocker = MoveGenerator(board).castle_blocker(side, castle)
    if blocker is not None:
        raise NotationError(f"Can't castle {castle.name.lower()}: {blocker}")
    return castle.king_move(side)


_GRAMMARS: tuple[tuple[re.Pattern[str], _Handler], ...] = (
    (re.compile(r"([a-h])([1-8])"), _parse_pawn_advance),
    (re.compile(r"([a-h])([a-h])([1-8])"), _parse_pawn_capture),
    (re.compile(r"([NBRQK])([a-h])([1-8])"), _parse_piece_move),
    (re.compile(r"([NBRQK])([a-h1-8])([a-h])([1-8])"), _parse_disambiguated_piece_move),
    (re.compile(r"O-O-O|O-O|0-0-0|0-0"), _parse_castle),
)


# -- Public API -------------------------------------------------------------


def parse_move(board: Board, side: Side, text: str) -> Move:
    """Parse *text* as a move by *side* on *board*.

    Raises:
        NotationError: The text matches no grammar, or names a move that
            cannot be resolved on this board.
    """
    clean = _DECORATIONS.sub("", text)
    for pattern, handler in _GRAMMARS:
        match = pattern.fullmatch(clean)
        if match is not None:
            return handler(board, side, match)
    raise NotationError(f"Invalid move: {text!r}")


def try_parse_move(board: Board, side: Side, text: str) -> ParseResult:
    """Like :func:`parse_move` but reports failure in the result."""
    try:
        return ParseResult(move=parse_move(board, side, text))
    except NotationError as exc:
        _LOGGER.debug("Rejected %r for %s: %s", text, side, exc)
        return ParseResult(error=str(exc))


def force_parse_move(board: Board, side: Side, text: str) -> Move:
    """Parse a move the caller knows to be valid."""
    try:
        return parse_move(board, side, text)
    except NotationError as exc:
        raise IllegalMoveError(str(exc)) from exc


def parse_move_list(board: Board, side: Side, text: str) -> list[Move]:
    """Parse comma separated moves, each played from the current position."""
    parts = [part for part in text.split(",") if part.strip()]
    if not parts:
        raise NotationError("Expected at least one move")
    return [parse_move(board, side, part) for part in parts]


def move_to_string(board: Board, move: Move) -> str:
    """Write *move* in the notation :func:`parse_move` reads back."""
    piece = board.get(move.source)
    if piece is None:
        raise NoPieceAtSquareError(f"There's no piece on {move.source.name}")

    side = piece.side
    destination = move.destination.name

    if piece.piece_type == PieceType.KING:
        castle = Castle.for_king_move(side, move)
        if castle is not None:
            return castle.notation

    if piece.piece_type == PieceType.PAWN:
        if move.source.file != move.destination.file:
            return move.source.file.char + destination
        return destination

    letter = piece.piece_type.letter
    candidates = _sources(board, side, piece.piece_type, move.destination)
    if move.source not in candidates:
        candidates.append(move.source)
    if len(candidates) == 1:
        return letter + destination

    same_file = [sq for sq in candidates if sq.file == move.source.file]
    if len(same_file) == 1:
        return letter + move.source.file.char + destination

    same_rank = [sq for sq in candidates if sq.rank == move.source.rank]
    if len(same_rank) == 1:
        return letter + move.source.rank.char + destination

    raise DisambiguationError(
        f"{move} needs both file and rank to disambiguate, which is unsupported"
    )
