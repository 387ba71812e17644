"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.piece import Piece
from chessrules.core.types import Location


@dataclass(frozen=True, slots=True)
class Move:
    """A proposed or historical transition of one piece."""

    piece: Piece
    from_loc: Location
    to_loc: Location

    def __str__(self) -> str:
        return f"{self.from_loc.name}{self.to_loc.name}"

    @property
    def uci(self) -> str:
        """Long-algebraic name, e.g. ``'e2e4'``."""
        return str(self)
