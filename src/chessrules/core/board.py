"""Board - the set of live pieces on an 8x8 grid."""

from __future__ import annotations

from typing import NamedTuple, overload

from chessrules.core.enums import Color, PieceKind
from chessrules.core.exceptions import InvariantViolation
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Location

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class PlacedPiece(NamedTuple):
    """Read-only view of one occupied square."""

    location: Location
    kind: PieceKind
    color: Color


class Board:
    """Mutable collection of pieces, at most one per location.

    Lookups are linear scans over the piece list; the list keeps insertion
    order, which is also the order :meth:`all_pieces` reports.
    """

    __slots__ = ("_pieces",)

    def __init__(self, pieces: list[Piece] | None = None) -> None:
        self._pieces: list[Piece] = []
        for piece in pieces or ():
            self.add(piece)

    # -- Element access -----------------------------------------------------

    def piece_at(self, loc: Location) -> Piece | None:
        for piece in self._pieces:
            if piece.location == loc:
                return piece
        return None

    def is_empty(self, loc: Location) -> bool:
        return self.piece_at(loc) is None

    def __len__(self) -> int:
        return len(self._pieces)

    # -- Query helpers ------------------------------------------------------

    def all_pieces(self, color: Color) -> list[Piece]:
        """Pieces of *color*, in insertion order."""
        return [p for p in self._pieces if p.color == color]

    def king_of(self, color: Color) -> Piece:
        """Return the single king of *color*."""
        for piece in self._pieces:
            if piece.color == color and piece.kind == PieceKind.KING:
                return piece
        raise InvariantViolation(f"No {color.name} king on board")

    @overload
    @staticmethod
    def is_inside_board(loc: Location, /) -> bool: ...

    @overload
    @staticmethod
    def is_inside_board(from_loc: Location, to_loc: Location, /) -> bool: ...

    @staticmethod
    def is_inside_board(*locations: Location) -> bool:
        """Whether every given location lies on the board."""
        return all(
            0 <= loc.x < BOARD_SIZE and 0 <= loc.y < BOARD_SIZE for loc in locations
        )

    # -- Mutation / copying -------------------------------------------------

    def add(self, piece: Piece) -> None:
        if not self.is_inside_board(piece.location):
            raise InvariantViolation(
                f"Piece placed off the board at {tuple(piece.location)}"
            )
        if self.piece_at(piece.location) is not None:
            raise InvariantViolation(f"Location {piece.location} is already occupied")
        self._pieces.append(piece)

    def remove(self, target: Location | Piece) -> bool:
        """Remove the piece at a location, or a specific piece.

        Returns whether anything was removed.
        """
        piece = target if isinstance(target, Piece) else self.piece_at(target)
        if piece is None:
            return False
        for idx, candidate in enumerate(self._pieces):
            if candidate is piece:
                del self._pieces[idx]
                return True
        return False

    def apply(self, move: Move) -> Piece | None:
        """Relocate ``move.piece`` to ``move.to_loc``, capturing any occupant.

        No legality checks happen here.  Returns the captured piece, if any.
        """
        piece = move.piece
        self.remove(piece)
        captured = self.piece_at(move.to_loc)
        if captured is not None:
            self.remove(captured)
        piece.location = move.to_loc
        self._pieces.append(piece)
        return captured

    def copy(self) -> Board:
        """Deep copy: every piece of the clone is an independent object."""
        b = Board()
        b._pieces = [p.copy() for p in self._pieces]
        return b

    def clear(self) -> None:
        self._pieces = []

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (Black on rows 0-1, White on rows 6-7)."""
        b = cls()
        for x in range(BOARD_SIZE):
            b.add(Piece(PieceKind.PAWN, Color.BLACK, Location(x, 1)))
            b.add(Piece(PieceKind.PAWN, Color.WHITE, Location(x, 6)))
        for x, kind in enumerate(_BACK_RANK):
            b.add(Piece(kind, Color.BLACK, Location(x, 0)))
            b.add(Piece(kind, Color.WHITE, Location(x, 7)))
        return b

    # -- Snapshots ----------------------------------------------------------

    def snapshot(self) -> tuple[PlacedPiece, ...]:
        """Every occupied square, ordered row by row."""
        placed = [PlacedPiece(p.location, p.kind, p.color) for p in self._pieces]
        placed.sort(key=lambda pp: (pp.location.y, pp.location.x))
        return tuple(placed)

    def rows(self) -> list[str]:
        """Eight text rows, top (row 0) first; ``.`` marks an empty square."""
        grid = [["."] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for piece in self._pieces:
            grid[piece.location.y][piece.location.x] = piece.letter
        return ["".join(row) for row in grid]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        lines: list[str] = []
        for y, row in enumerate(self.rows()):
            lines.append(f"{BOARD_SIZE - y} {' '.join(row)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
