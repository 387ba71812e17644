"""High-level chess rules: move validation, check and checkmate."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import CheckmatePolicy, Color, MoveVerdict
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Location


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Tunable rule behaviour.

    Args:
        path_blocking: Sliding pieces and the pawn double step may not pass
            through occupied squares.
        checkmate_policy: How mate is detected after each committed move.
        reject_after_finish: Refuse every move once the game is over.
    """

    path_blocking: bool = True
    checkmate_policy: CheckmatePolicy = CheckmatePolicy.KING_ESCAPE
    reject_after_finish: bool = True

    @classmethod
    def standard(cls) -> RulesConfig:
        return cls()

    @classmethod
    def legacy(cls) -> RulesConfig:
        """Sliders ignore blockers and a finished game keeps accepting moves."""
        return cls(path_blocking=False, reject_after_finish=False)

    def generator(self, board: Board) -> MoveGenerator:
        return MoveGenerator(board, path_blocking=self.path_blocking)


_DEFAULT_CONFIG = RulesConfig()


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def validate_move(
        board: Board,
        side_to_move: Color,
        from_loc: Location,
        to_loc: Location,
        config: RulesConfig = _DEFAULT_CONFIG,
    ) -> MoveVerdict:
        """Run the validation gate, stopping at the first failing check.

        The board is left untouched whatever the verdict.
        """
        if not Board.is_inside_board(from_loc, to_loc):
            return MoveVerdict.OUT_OF_BOARD

        piece = board.piece_at(from_loc)
        if piece is None:
            return MoveVerdict.NO_PIECE
        if piece.color != side_to_move:
            return MoveVerdict.WRONG_TURN

        target = board.piece_at(to_loc)
        if target is not None and target.color == side_to_move:
            return MoveVerdict.OWN_PIECE_CAPTURE

        gen = config.generator(board)
        if not gen.is_reachable(piece, to_loc):
            return MoveVerdict.ILLEGAL_GEOMETRY
        if gen.exposes_king(from_loc, to_loc):
            return MoveVerdict.EXPOSES_KING
        return MoveVerdict.LEGAL

    @staticmethod
    def is_legal_move(
        board: Board,
        side_to_move: Color,
        from_loc: Location,
        to_loc: Location,
        config: RulesConfig = _DEFAULT_CONFIG,
    ) -> bool:
        verdict = Rules.validate_move(board, side_to_move, from_loc, to_loc, config)
        return verdict.is_legal

    @staticmethod
    def legal_moves(
        board: Board, color: Color, config: RulesConfig = _DEFAULT_CONFIG
    ) -> list[Move]:
        return config.generator(board).generate_moves(color)

    @staticmethod
    def is_in_check(
        board: Board, color: Color, config: RulesConfig = _DEFAULT_CONFIG
    ) -> bool:
        return config.generator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(
        board: Board, color: Color, config: RulesConfig = _DEFAULT_CONFIG
    ) -> bool:
        """Is *color* checkmated?

        With ``KING_ESCAPE`` only the king's own escape squares are tried:
        interposing another piece or capturing the checker with one is not
        considered, so some positions are reported as mate too early.
        """
        gen = config.generator(board)
        if not gen.is_in_check(color):
            return False

        if config.checkmate_policy == CheckmatePolicy.FULL:
            return not gen.generate_moves(color)

        king = board.king_of(color)
        for escape in gen.destinations(king):
            if not Board.is_inside_board(escape):
                continue
            occupant = board.piece_at(escape)
            if occupant is not None and occupant.color == color:
                continue
            if not gen.exposes_king(king.location, escape):
                return False
        return True
