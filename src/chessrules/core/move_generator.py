"""Geometric reachability, attack detection and self-check simulation.

Layering, bottom-up:

* :meth:`MoveGenerator.is_reachable` / :meth:`MoveGenerator.attacks` - pure
  template matching against the current occupancy.
* :meth:`MoveGenerator.is_square_attacked` / :meth:`MoveGenerator.is_in_check`
  - built on ``attacks`` only.
* :meth:`MoveGenerator.exposes_king` - applies a move to a scratch copy and
  asks ``is_in_check``.

Nothing in here consults whose turn it is.
"""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.template import PAWN_START_ROWS, MoveTemplate
from chessrules.core.types import BOARD_SIZE, Location


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def relative_offset(piece: Piece, to_loc: Location) -> tuple[int, int]:
    """Displacement ``from - to`` with ``dy`` pointing toward the opponent."""
    dx = piece.location.x - to_loc.x
    dy = piece.location.y - to_loc.y
    if piece.color == Color.BLACK:
        dy = -dy
    return dx, dy


class MoveGenerator:
    """Answers movement questions for a given :class:`Board`.

    Args:
        board: Board to inspect.  Only :meth:`exposes_king` builds other
            boards; the inspected one is never mutated.
        path_blocking: Require intermediate squares of straight and diagonal
            moves longer than one step to be empty.
    """

    __slots__ = ("_board", "_path_blocking")

    def __init__(self, board: Board, *, path_blocking: bool = True) -> None:
        self._board = board
        self._path_blocking = path_blocking

    @property
    def board(self) -> Board:
        return self._board

    # -- Geometry -----------------------------------------------------------

    def is_reachable(self, piece: Piece, to_loc: Location) -> bool:
        """Can *piece* move to *to_loc* given templates and occupancy?"""
        target = self._board.piece_at(to_loc)
        if target is not None and target.color == piece.color:
            return False
        return self._matches(piece, to_loc, capture=target is not None)

    def attacks(self, piece: Piece, target: Location) -> bool:
        """Could *piece* capture an opponent standing on *target*?"""
        return self._matches(piece, target, capture=True)

    def destinations(self, piece: Piece) -> Iterator[Location]:
        """Single-step destinations of every template (may be off-board)."""
        direction = -1 if piece.color == Color.BLACK else 1
        loc = piece.location
        for t in piece.templates:
            yield Location(loc.x - t.dx, loc.y - t.dy * direction)

    def _matches(self, piece: Piece, to_loc: Location, *, capture: bool) -> bool:
        dx, dy = relative_offset(piece, to_loc)
        if dx == 0 and dy == 0:
            return False

        if not piece.repeatable:
            for t in piece.templates:
                if (t.dx, t.dy) == (dx, dy):
                    return self._conditions_hold(piece, t, capture) and (
                        self._path_clear(piece.location, to_loc)
                    )
            return False

        for factor in range(1, BOARD_SIZE + 1):
            for t in piece.templates:
                if t.scaled(factor) == (dx, dy):
                    return self._path_clear(piece.location, to_loc)
        return False

    @staticmethod
    def _conditions_hold(piece: Piece, template: MoveTemplate, capture: bool) -> bool:
        if template.capture_only and not capture:
            return False
        if template.move_only and capture:
            return False
        if template.first_move_only:
            return piece.location.y == PAWN_START_ROWS[int(piece.color)]
        return True

    def _path_clear(self, from_loc: Location, to_loc: Location) -> bool:
        if not self._path_blocking:
            return True
        dx = to_loc.x - from_loc.x
        dy = to_loc.y - from_loc.y
        if dx and dy and abs(dx) != abs(dy):
            return True  # knight jump, no path
        step_x, step_y = _sign(dx), _sign(dy)
        for k in range(1, max(abs(dx), abs(dy))):
            if not self._board.is_empty(from_loc.offset(step_x * k, step_y * k)):
                return False
        return True

    # -- Attack detection ---------------------------------------------------

    def attackers(self, loc: Location, by_color: Color) -> list[Piece]:
        """Pieces of *by_color* that attack *loc*."""
        return [
            p
            for p in self._board.all_pieces(by_color)
            if p.location != loc and self.attacks(p, loc)
        ]

    def is_square_attacked(self, loc: Location, by_color: Color) -> bool:
        """Is *loc* attacked by any piece of *by_color*?"""
        return any(
            p.location != loc and self.attacks(p, loc)
            for p in self._board.all_pieces(by_color)
        )

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king = self._board.king_of(color)
        return self.is_square_attacked(king.location, color.opposite)

    # -- Speculation --------------------------------------------------------

    def exposes_king(self, from_loc: Location, to_loc: Location) -> bool:
        """Would moving the piece on *from_loc* leave its own king attacked?

        The move is played on a deep copy of the board.
        """
        scratch = self._board.copy()
        piece = scratch.piece_at(from_loc)
        if piece is None:
            raise ValueError(f"No piece on {from_loc}")
        scratch.apply(Move(piece, from_loc, to_loc))
        gen = MoveGenerator(scratch, path_blocking=self._path_blocking)
        return gen.is_in_check(piece.color)

    def generate_moves(self, color: Color) -> list[Move]:
        """All moves for *color* that are reachable and keep its king safe."""
        moves: list[Move] = []
        for piece in self._board.all_pieces(color):
            from_loc = piece.location
            for y in range(BOARD_SIZE):
                for x in range(BOARD_SIZE):
                    to_loc = Location(x, y)
                    if not self.is_reachable(piece, to_loc):
                        continue
                    if self.exposes_king(from_loc, to_loc):
                        continue
                    moves.append(Move(piece, from_loc, to_loc))
        return moves
