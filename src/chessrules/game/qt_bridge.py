"""Qt bridge that re-emits controller callbacks as Qt signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.board import Board
from chessrules.core.enums import GameResult, MoveVerdict
from chessrules.core.types import Location, parse_location
from chessrules.game.controller import GameController, MoveRecord


class GameSignals(QObject):
    """Thread-affine adapter between a :class:`GameController` and a Qt view.

    ``move_applied`` carries the move record and the board rows after the
    move, ``move_rejected`` the two location names and the rejection text.
    """

    move_applied = pyqtSignal(object, object)
    move_rejected = pyqtSignal(str, str, str)
    game_over = pyqtSignal(int)

    def __init__(self, controller: GameController) -> None:
        super().__init__()
        self._controller = controller
        controller.events.on_move.append(self._on_move)
        controller.events.on_rejected.append(self._on_rejected)
        controller.events.on_game_over.append(self._on_game_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot(str, str)
    def request_move(self, from_name: str, to_name: str) -> None:
        """Play a move given as two algebraic names, e.g. ``('e2', 'e4')``."""
        try:
            from_loc = parse_location(from_name)
            to_loc = parse_location(to_name)
        except ValueError as exc:
            self.move_rejected.emit(from_name, to_name, str(exc))
            return
        self._controller.play_move(from_loc, to_loc)

    def detach(self) -> None:
        """Stop forwarding controller events."""
        events = self._controller.events
        events.on_move.remove(self._on_move)
        events.on_rejected.remove(self._on_rejected)
        events.on_game_over.remove(self._on_game_over)

    # -- Controller callbacks -----------------------------------------------

    def _on_move(self, record: MoveRecord, board: Board) -> None:
        self.move_applied.emit(record, board.rows())

    def _on_rejected(
        self, from_loc: Location, to_loc: Location, verdict: MoveVerdict
    ) -> None:
        self.move_rejected.emit(str(from_loc), str(to_loc), verdict.reason)

    def _on_game_over(self, result: GameResult) -> None:
        self.game_over.emit(int(result))
