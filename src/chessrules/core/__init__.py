"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, Rules, parse_location

    board = Board.initial()
    Rules.is_legal_move(board, Color.WHITE, parse_location("e2"), parse_location("e4"))
"""

from chessrules.core.board import Board, PlacedPiece
from chessrules.core.enums import (
    CheckmatePolicy,
    Color,
    GameResult,
    MoveVerdict,
    PieceKind,
)
from chessrules.core.exceptions import ChessError, InvariantViolation
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_ROWS,
    board_from_rows,
    board_to_rows,
    parse_move,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules, RulesConfig
from chessrules.core.template import MoveTemplate
from chessrules.core.types import Location, location_name, parse_location

__all__ = [
    # Enums
    "CheckmatePolicy",
    "Color",
    "GameResult",
    "MoveVerdict",
    "PieceKind",
    # Types / helpers
    "Location",
    "location_name",
    "parse_location",
    # Errors
    "ChessError",
    "InvariantViolation",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveTemplate",
    "Piece",
    "PlacedPiece",
    "Rules",
    "RulesConfig",
    # Notation
    "STARTING_ROWS",
    "board_from_rows",
    "board_to_rows",
    "parse_move",
]
