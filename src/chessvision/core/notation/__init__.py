"""Notation package: algebraic move notation and FEN."""

from chessvision.core.notation.fen import STARTING_FEN, board_from_fen, board_to_fen
from chessvision.core.notation.models import ParsedFen, ParseResult
from chessvision.core.notation.san import (
    force_parse_move,
    move_to_string,
    parse_move,
    parse_move_list,
    try_parse_move,
)

__all__ = [
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
]
