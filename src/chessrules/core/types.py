"""Board coordinates and coordinate helpers.

Board layout (row 0 at the top, Black's side):
    (0, 0)=a8, (1, 0)=b8, ..., (7, 0)=h8
    ...
    (0, 7)=a1, (1, 7)=b1, ..., (7, 7)=h1

White starts on rows 6-7 and moves toward row 0.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


class Location(NamedTuple):
    """Immutable ``(x, y)`` board coordinate.

    Off-board values are representable so that candidate destinations can be
    computed freely; use :meth:`is_inside` before touching a board.
    """

    x: int
    y: int

    def is_inside(self) -> bool:
        return 0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE

    def offset(self, dx: int, dy: int) -> Location:
        return Location(self.x + dx, self.y + dy)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Location(4, 6)`` → ``'e2'``."""
        return location_name(self)

    def __str__(self) -> str:
        return self.name if self.is_inside() else f"({self.x}, {self.y})"


def location_name(loc: Location) -> str:
    """Human-readable name of an on-board location."""
    if not loc.is_inside():
        raise ValueError(f"Location off the board: ({loc.x}, {loc.y})")
    return _FILES[loc.x] + str(BOARD_SIZE - loc.y)


def parse_location(name: str) -> Location:
    """Parse an algebraic name, e.g. ``'e2'`` → ``Location(4, 6)``."""
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in _FILES or text[1] not in _RANKS:
        raise ValueError(f"Invalid location name: {name!r}")
    return Location(_FILES.index(text[0]), BOARD_SIZE - int(text[1]))
