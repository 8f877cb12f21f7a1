"""FEN parsing and serialization."""

from __future__ import annotations

from chessvision.core.board import Board
from chessvision.core.enums import CastlingRights, Side
from chessvision.core.errors import NotationError
from chessvision.core.notation.models import ParsedFen
from chessvision.core.piece import Piece
from chessvision.core.types import File, Rank, Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_LETTERS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def board_to_fen(
    board: Board, side_to_move: Side, halfmove_clock: int = 0, fullmove_number: int = 1
) -> str:
    """Serialise *board* to FEN. En passant is always ``-``."""
    # 1. Board
    rows: list[str] = []
    for rank in reversed(Rank):
        empty = 0
        row = ""
        for file in File:
            piece = board.get(Square(file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if side_to_move == Side.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        letter for letter, right in _CASTLING_LETTERS if board.castling & right
    )
    if not castling_str:
        castling_str = "-"

    return f"{board_str} {side_str} {castling_str} - {halfmove_clock} {fullmove_number}"


def board_from_fen(fen: str) -> ParsedFen:
    """Parse a FEN string."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise NotationError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 3. Castling first: the board carries the rights.
    castling = CastlingRights.NONE
    if castling_part != "-":
        rights = dict(_CASTLING_LETTERS)
        seen: set[str] = set()
        for ch in castling_part:
            right = rights.get(ch)
            if right is None or ch in seen:
                raise NotationError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise NotationError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board(castling)
    for rank_idx, rank_text in enumerate(ranks):
        rank = Rank(7 - rank_idx)
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise NotationError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise NotationError(f"Invalid FEN rank width: {fen!r}")
                piece = Piece.from_char(ch)
                board.add(piece.side, piece.piece_type, Square(File(file), rank))
                file += 1
            if file > 8:
                raise NotationError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise NotationError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Side.WHITE
    elif side_part == "b":
        side = Side.BLACK
    else:
        raise NotationError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 4. En passant, read for completeness only.
    ep: Square | None = None
    if ep_part != "-":
        ep = Square.from_name(ep_part)
        if ep.rank not in (Rank.THREE, Rank.SIX):
            raise NotationError(f"Invalid FEN en-passant square: {ep_part!r}")

    # 5–6. Clocks (optional)
    try:
        halfmove = int(parts[4]) if len(parts) > 4 else 0
        fullmove = int(parts[5]) if len(parts) > 5 else 1
    except ValueError:
        raise NotationError(f"Invalid FEN clocks: {fen!r}") from None
    if halfmove < 0:
        raise NotationError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    if fullmove < 1:
        raise NotationError(f"Invalid FEN fullmove number: {parts[5]!r}")

    return ParsedFen(board, side, ep, halfmove, fullmove)
