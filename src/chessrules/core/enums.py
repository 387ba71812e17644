"""Core enumerations for the rules engine."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """The six piece variants."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS


class MoveVerdict(IntEnum):
    """Outcome of the validation gate for a single (from, to) request."""

    LEGAL = 0
    OUT_OF_BOARD = auto()
    NO_PIECE = auto()
    WRONG_TURN = auto()
    OWN_PIECE_CAPTURE = auto()
    ILLEGAL_GEOMETRY = auto()
    EXPOSES_KING = auto()
    GAME_FINISHED = auto()

    @property
    def is_legal(self) -> bool:
        return self == MoveVerdict.LEGAL

    @property
    def reason(self) -> str:
        """Human-readable explanation suitable for a rejection message."""
        return _VERDICT_REASONS[self]


_VERDICT_REASONS: dict[MoveVerdict, str] = {
    MoveVerdict.LEGAL: "legal move",
    MoveVerdict.OUT_OF_BOARD: "location is outside the board",
    MoveVerdict.NO_PIECE: "no piece on the origin square",
    MoveVerdict.WRONG_TURN: "it is not that side's turn",
    MoveVerdict.OWN_PIECE_CAPTURE: "cannot capture your own piece",
    MoveVerdict.ILLEGAL_GEOMETRY: "the piece cannot move that way",
    MoveVerdict.EXPOSES_KING: "the move would leave your king in check",
    MoveVerdict.GAME_FINISHED: "the game is already finished",
}


class CheckmatePolicy(IntEnum):
    """How checkmate is detected after each committed move."""

    KING_ESCAPE = auto()  # only the king's own escape squares are searched
    FULL = auto()  # no legal move at all for the checked side
