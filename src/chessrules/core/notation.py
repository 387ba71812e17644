"""Text board codec and move-request parsing.

A board is written as eight rows of eight characters, top row (Black's back
rank) first.  Uppercase letters are Black pieces, lowercase letters White
pieces and ``.`` an empty square::

    RNBQKBNR
    PPPPPPPP
    ........
    ........
    ........
    ........
    pppppppp
    rnbqkbnr
"""

from __future__ import annotations

from collections.abc import Iterable

from chessrules.core.board import Board
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Location, parse_location

EMPTY = "."

STARTING_ROWS: tuple[str, ...] = (
    "RNBQKBNR",
    "PPPPPPPP",
    "........",
    "........",
    "........",
    "........",
    "pppppppp",
    "rnbqkbnr",
)


def board_from_rows(rows: Iterable[str] | str) -> Board:
    """Parse eight text rows (or one newline-separated string) into a Board."""
    if isinstance(rows, str):
        rows = rows.split()
    lines = [row.strip() for row in rows if row.strip()]
    if len(lines) != BOARD_SIZE:
        raise ValueError(f"Board text must contain {BOARD_SIZE} rows, got {len(lines)}")

    board = Board()
    for y, line in enumerate(lines):
        if len(line) != BOARD_SIZE:
            raise ValueError(f"Invalid row width at row {y}: {line!r}")
        for x, ch in enumerate(line):
            if ch == EMPTY:
                continue
            board.add(Piece.from_letter(ch, Location(x, y)))
    return board


def board_to_rows(board: Board) -> list[str]:
    """Serialise a Board to eight text rows."""
    return board.rows()


def parse_move(text: str) -> tuple[Location, Location]:
    """Parse a move request such as ``'e2e4'`` or ``'e2 e4'``."""
    compact = "".join(text.split()).replace("-", "")
    if len(compact) != 4:
        raise ValueError(f"Invalid move text: {text!r}")
    return parse_location(compact[:2]), parse_location(compact[2:])
