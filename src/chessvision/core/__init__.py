"""Core domain layer: board state and the rules of legal play.

Quick start::

    from chessvision.core import Board, MoveGenerator, Side, parse_move

    board = Board.starting_position()
    board.make_move(parse_move(board, Side.WHITE, "e4"))
    for move in MoveGenerator(board).get_legal_moves_for_side(Side.BLACK):
        print(move)
"""

from chessvision.core.bitboard import Bitboard
from chessvision.core.board import Board
from chessvision.core.enums import CastlingRights, PieceType, Side
from chessvision.core.errors import (
    ChessError,
    DisambiguationError,
    EmptySourceError,
    IllegalMoveError,
    KingCountError,
    NoPieceAtSquareError,
    NotationError,
    PreconditionError,
    SquareOccupiedError,
    UnsupportedPieceError,
)
from chessvision.core.move import Castle, Move, Path
from chessvision.core.move_generator import MoveGenerator
from chessvision.core.notation import (
    STARTING_FEN,
    ParsedFen,
    ParseResult,
    board_from_fen,
    board_to_fen,
    force_parse_move,
    move_to_string,
    parse_move,
    parse_move_list,
    try_parse_move,
)
from chessvision.core.paths import shortest_paths
from chessvision.core.piece import Piece
from chessvision.core.rules import Rules
from chessvision.core.types import (
    Direction,
    File,
    Rank,
    Square,
    parse_squares,
    squares_to_string,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Direction",
    "File",
    "PieceType",
    "Rank",
    "Side",
    # Coordinates
    "Square",
    "parse_squares",
    "squares_to_string",
    # Domain objects
    "Bitboard",
    "Board",
    "Castle",
    "Move",
    "MoveGenerator",
    "Path",
    "Piece",
    "Rules",
    "shortest_paths",
    # Notation
    "STARTING_FEN",
    "ParsedFen",
    "ParseResult",
    "board_from_fen",
    "board_to_fen",
    "force_parse_move",
    "move_to_string",
    "parse_move",
    "parse_move_list",
    "try_parse_move",
    # Errors
    "ChessError",
    "DisambiguationError",
    "EmptySourceError",
    "IllegalMoveError",
    "KingCountError",
    "NoPieceAtSquareError",
    "NotationError",
    "PreconditionError",
    "SquareOccupiedError",
    "UnsupportedPieceError",
]
