"""Cells covered by a placement.

Everything here is a pure function of the placement. No board state is
consulted, so the same placement always resolves to the same cells.
"""

from __future__ import annotations

from kingdomino.utils.grid_math import Position, step

from .enums import TileOrientation
from .models import CASTLE, CastleTile, Domino, Square, TilePlacement

# Offset of the second half from the anchor. "Up" is decreasing y.
_SECOND_HALF_OFFSETS: dict[TileOrientation, tuple[int, int]] = {
    TileOrientation.LEFT_RIGHT: (1, 0),
    TileOrientation.TOP_BOTTOM: (0, -1),
    TileOrientation.RIGHT_LEFT: (-1, 0),
    TileOrientation.BOTTOM_TOP: (0, 1),
}


def second_half_position(anchor: Position, orientation: TileOrientation) -> Position:
    """Return the cell a domino's second half lands on."""
    dx, dy = _SECOND_HALF_OFFSETS[orientation]
    return step(anchor, dx, dy)


def placement_cells(placement: TilePlacement) -> tuple[Position, ...]:
    """Return the cells a placement occupies, anchor first.

    A castle covers one cell, a domino two orthogonally adjacent ones.
    """
    match placement.tile:
        case CastleTile():
            return (placement.position,)
        case Domino():
            return (
                placement.position,
                second_half_position(placement.position, placement.orientation),
            )
    raise TypeError(f"unsupported tile: {placement.tile!r}")


def placement_squares(placement: TilePlacement) -> list[tuple[Position, Square]]:
    """Pair each covered cell with what it holds: the castle or a domino half."""
    cells = placement_cells(placement)
    match placement.tile:
        case CastleTile():
            return [(cells[0], CASTLE)]
        case Domino(first=first, second=second):
            return [(cells[0], first), (cells[1], second)]
    raise TypeError(f"unsupported tile: {placement.tile!r}")
