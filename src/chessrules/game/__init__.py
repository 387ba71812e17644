"""Game management layer: turn order, commits, history, Qt adapter.

Quick start::

    from chessrules.core import parse_location
    from chessrules.game import GameController

    ctrl = GameController()
    outcome = ctrl.play_move(parse_location("e2"), parse_location("e4"))
"""

from chessrules.game.controller import (
    GameController,
    GameEvents,
    MoveOutcome,
    MoveRecord,
)

__all__ = [
    "GameController",
    "GameEvents",
    "MoveOutcome",
    "MoveRecord",
]
