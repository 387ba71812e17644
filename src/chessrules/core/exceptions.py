"""Exceptions raised by the rules engine.

Illegal move requests are never raised; they are reported as a
:class:`~chessrules.core.enums.MoveVerdict`.  Exceptions here signal broken
board invariants, i.e. a bug upstream of the engine.
"""


class ChessError(Exception):
    """Base class for all rules-engine errors."""


class InvariantViolation(ChessError, ValueError):
    """The board reached a state a legal game can never produce."""
