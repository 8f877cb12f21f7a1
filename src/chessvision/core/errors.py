"""Exception hierarchy for the rules engine.

Two families:

* :class:`NotationError` - bad user input (notation, square lists, FEN).
  Callers such as a REPL catch it, show the message and re-prompt.
* :class:`PreconditionError` - misuse of the API by the caller. These are
  not meant to be caught in normal operation.
"""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by :mod:`chessvision`."""


class NotationError(ChessError, ValueError):
    """Malformed, ambiguous or unplayable notation."""


class PreconditionError(ChessError, RuntimeError):
    """The caller broke an API precondition."""


class NoPieceAtSquareError(PreconditionError):
    pass


class SquareOccupiedError(PreconditionError):
    pass


class EmptySourceError(PreconditionError):
    """A bitboard was asked to move a bit it does not contain."""


class KingCountError(PreconditionError):
    pass


class UnsupportedPieceError(PreconditionError):
    pass


class IllegalMoveError(PreconditionError):
    pass


class DisambiguationError(PreconditionError):
    """A move cannot be written with a single disambiguating file or rank."""
