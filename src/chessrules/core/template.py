"""Movement templates: the step shapes each piece kind may use.

Displacements are expressed as ``from - to`` with ``dy`` normalised so that a
positive value always points toward the opponent's side.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from chessrules.core.enums import PieceKind


@dataclass(frozen=True, slots=True)
class MoveTemplate:
    """A displacement vector plus the conditions under which it applies."""

    dx: int
    dy: int
    capture_only: bool = False
    move_only: bool = False  # destination must be empty
    first_move_only: bool = False

    def scaled(self, factor: int) -> tuple[int, int]:
        return (self.dx * factor, self.dy * factor)


def _plain(offsets: tuple[tuple[int, int], ...]) -> tuple[MoveTemplate, ...]:
    return tuple(MoveTemplate(dx, dy) for dx, dy in offsets)


PAWN_TEMPLATES: tuple[MoveTemplate, ...] = (
    MoveTemplate(0, 1, move_only=True),
    MoveTemplate(0, 2, move_only=True, first_move_only=True),
    MoveTemplate(1, 1, capture_only=True),
    MoveTemplate(-1, 1, capture_only=True),
)

KNIGHT_TEMPLATES = _plain(
    ((-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1))
)
BISHOP_TEMPLATES = _plain(((-1, -1), (-1, 1), (1, -1), (1, 1)))
ROOK_TEMPLATES = _plain(((-1, 0), (1, 0), (0, -1), (0, 1)))
QUEEN_TEMPLATES = BISHOP_TEMPLATES + ROOK_TEMPLATES
KING_TEMPLATES = QUEEN_TEMPLATES

TEMPLATES: MappingProxyType[PieceKind, tuple[MoveTemplate, ...]] = MappingProxyType(
    {
        PieceKind.PAWN: PAWN_TEMPLATES,
        PieceKind.KNIGHT: KNIGHT_TEMPLATES,
        PieceKind.BISHOP: BISHOP_TEMPLATES,
        PieceKind.ROOK: ROOK_TEMPLATES,
        PieceKind.QUEEN: QUEEN_TEMPLATES,
        PieceKind.KING: KING_TEMPLATES,
    }
)

REPEATABLE_KINDS: frozenset[PieceKind] = frozenset(
    (PieceKind.BISHOP, PieceKind.ROOK, PieceKind.QUEEN)
)

# Row a pawn of each color (by Color value) starts on.
PAWN_START_ROWS: tuple[int, int] = (6, 1)
