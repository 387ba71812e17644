"""Piece entity."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceKind
from chessrules.core.template import REPEATABLE_KINDS, TEMPLATES, MoveTemplate
from chessrules.core.types import Location

# Board letter, lowercase; Black pieces are rendered uppercase.
_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "p",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "k",
}
_KINDS_BY_LETTER: dict[str, PieceKind] = {v: k for k, v in _LETTERS.items()}


@dataclass(slots=True, eq=False)
class Piece:
    """A piece on the board.

    Pieces are entities: two pieces compare equal only if they are the same
    object.  ``location`` is mutated on every accepted move; the movement
    data is shared per kind and never changes.
    """

    kind: PieceKind
    color: Color
    location: Location

    @property
    def templates(self) -> tuple[MoveTemplate, ...]:
        return TEMPLATES[self.kind]

    @property
    def repeatable(self) -> bool:
        """Whether templates may be scaled, i.e. the piece slides."""
        return self.kind in REPEATABLE_KINDS

    @property
    def letter(self) -> str:
        """Single board character (uppercase = black, lowercase = white)."""
        letter = _LETTERS[self.kind]
        return letter.upper() if self.color == Color.BLACK else letter

    def copy(self) -> Piece:
        return Piece(self.kind, self.color, self.location)

    @classmethod
    def from_letter(cls, letter: str, location: Location) -> Piece:
        """Create a piece from its board character, e.g. ``'N'`` → black knight."""
        try:
            kind = _KINDS_BY_LETTER[letter.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {letter!r}") from None
        color = Color.BLACK if letter.isupper() else Color.WHITE
        return cls(kind, color, location)

    def __str__(self) -> str:
        return self.letter
