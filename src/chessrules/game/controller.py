"""GameController: turn order, move commits and terminal-state detection.

Validation is delegated to :class:`~chessrules.core.rules.Rules`, which never
mutates anything.  :meth:`GameController.play_move` is the single place where
the live board changes and where the game can become finished.
Emits events via simple callbacks so renderers / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.board import Board, PlacedPiece
from chessrules.core.enums import Color, GameResult, MoveVerdict, PieceKind
from chessrules.core.move import Move
from chessrules.core.rules import Rules, RulesConfig
from chessrules.core.types import Location

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    uci: str
    from_loc: Location
    to_loc: Location
    kind: PieceKind
    color: Color
    captured: PieceKind | None = None
    was_check: bool = False


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What :meth:`GameController.play_move` reports back to the caller."""

    accepted: bool
    verdict: MoveVerdict
    is_finished: bool
    record: MoveRecord | None = None

    @property
    def reason(self) -> str:
        return self.verdict.reason


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, Board], None]  # record, live board
RejectCallback = Callable[[Location, Location, MoveVerdict], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns the live board and decides whose turn it is.

    Not thread-safe: a host serving several threads must serialise calls per
    controller instance.
    """

    __slots__ = (
        "_board",
        "_config",
        "_current_player",
        "_is_finished",
        "_result",
        "_history",
        "_undo_boards",
        "events",
    )

    def __init__(
        self,
        config: RulesConfig | None = None,
        board: Board | None = None,
    ) -> None:
        self._config = config if config is not None else RulesConfig.standard()
        self.events = GameEvents()
        self.new_game(board)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def config(self) -> RulesConfig:
        return self._config

    @property
    def current_player(self) -> Color:
        return self._current_player

    @property
    def is_finished(self) -> bool:
        return self._is_finished

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self._history)

    # ── Setup ────────────────────────────────────────────────────────────

    def new_game(self, board: Board | None = None) -> None:
        """Start over from the initial layout (or *board*), White to move."""
        self._board = board if board is not None else Board.initial()
        self._board.king_of(Color.WHITE)
        self._board.king_of(Color.BLACK)
        self._current_player = Color.WHITE
        self._is_finished = False
        self._result = GameResult.IN_PROGRESS
        self._history: list[MoveRecord] = []
        self._undo_boards: list[Board] = []
        _LOGGER.info("New game started with %d pieces", len(self._board))

    # ── Queries ──────────────────────────────────────────────────────────

    def check_move(self, from_loc: Location, to_loc: Location) -> MoveVerdict:
        """Validate a move for the current player without changing anything."""
        if self._is_finished and self._config.reject_after_finish:
            return MoveVerdict.GAME_FINISHED
        return Rules.validate_move(
            self._board, self._current_player, from_loc, to_loc, self._config
        )

    def is_valid_move(self, from_loc: Location, to_loc: Location) -> bool:
        return self.check_move(from_loc, to_loc).is_legal

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        if self._is_finished and self._config.reject_after_finish:
            return []
        return Rules.legal_moves(self._board, self._current_player, self._config)

    def is_in_check(self, color: Color | None = None) -> bool:
        color = self._current_player if color is None else color
        return Rules.is_in_check(self._board, color, self._config)

    def snapshot(self) -> tuple[PlacedPiece, ...]:
        """Read-only view of the live board for renderers and loggers."""
        return self._board.snapshot()

    # ── Commands ─────────────────────────────────────────────────────────

    def play_move(self, from_loc: Location, to_loc: Location) -> MoveOutcome:
        """Validate and, if legal, commit a move for the current player."""
        verdict = self.check_move(from_loc, to_loc)
        if not verdict.is_legal:
            _LOGGER.debug(
                "Rejected %s -> %s for %s: %s",
                from_loc,
                to_loc,
                self._current_player,
                verdict.reason,
            )
            self._emit_rejected(from_loc, to_loc, verdict)
            return MoveOutcome(False, verdict, self._is_finished)

        record = self._commit(from_loc, to_loc)
        self._emit_move(record)

        if self._is_finished:
            self._emit_game_over(self._result)
        return MoveOutcome(True, verdict, self._is_finished, record)

    def undo_move(self) -> bool:
        """Take back the last committed move. Returns True on success."""
        if not self._undo_boards:
            return False
        self._board = self._undo_boards.pop()
        record = self._history.pop()
        self._current_player = record.color
        self._is_finished = False
        self._result = GameResult.IN_PROGRESS
        _LOGGER.info("Undid %s", record.uci)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, from_loc: Location, to_loc: Location) -> MoveRecord:
        piece = self._board.piece_at(from_loc)
        assert piece is not None
        mover = self._current_player
        move = Move(piece, from_loc, to_loc)

        self._undo_boards.append(self._board.copy())
        captured = self._board.apply(move)
        self._current_player = mover.opposite

        opponent = self._current_player
        was_check = Rules.is_in_check(self._board, opponent, self._config)
        record = MoveRecord(
            uci=move.uci,
            from_loc=from_loc,
            to_loc=to_loc,
            kind=piece.kind,
            color=mover,
            captured=captured.kind if captured is not None else None,
            was_check=was_check,
        )
        self._history.append(record)
        _LOGGER.debug("%s played %s", mover, record.uci)

        if was_check and Rules.is_checkmate(self._board, opponent, self._config):
            self._is_finished = True
            self._result = GameResult.win_for(mover)
            _LOGGER.info("Checkmate after %s: %s", record.uci, self._result.name)
        return record

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._board)

    def _emit_rejected(
        self, from_loc: Location, to_loc: Location, verdict: MoveVerdict
    ) -> None:
        for cb in self.events.on_rejected:
            cb(from_loc, to_loc, verdict)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)
