"""Dataclasses describing tiles and placements.

Every type here is an immutable value. The mutable board lives in
:mod:`kingdomino.domain.kingdom`.
"""

from __future__ import annotations

from dataclasses import dataclass

from kingdomino.utils.grid_math import ORIGIN, Position

from .enums import TileOrientation, TileType


@dataclass(frozen=True, slots=True)
class DominoSide:
    """One half of a domino: a terrain kind and its printed crowns."""

    tile_type: TileType
    crown_count: int = 0

    def __post_init__(self) -> None:
        if self.crown_count < 0:
            raise ValueError(f"crown_count must be non-negative, got {self.crown_count}")


@dataclass(frozen=True, slots=True)
class Domino:
    """Two-cell tile. ``first`` is the half that sits on the anchor cell."""

    first: DominoSide
    second: DominoSide

    def flip(self) -> Domino:
        """Return the same domino with its halves swapped."""
        return Domino(self.second, self.first)

    @property
    def sides(self) -> tuple[DominoSide, DominoSide]:
        return self.first, self.second

    @property
    def crown_count(self) -> int:
        return self.first.crown_count + self.second.crown_count


@dataclass(frozen=True, slots=True)
class CastleTile:
    """The single-cell starting tile every kingdom is built around."""


CASTLE = CastleTile()

Tile = CastleTile | Domino

# What a single occupied cell holds: the castle or one domino half.
Square = CastleTile | DominoSide


@dataclass(frozen=True, slots=True)
class TilePlacement:
    """A tile pinned to an anchor cell with an orientation.

    For a domino the anchor receives ``tile.first``; the orientation picks the
    cell that receives ``tile.second``. The orientation of a castle placement
    is ignored.
    """

    tile: Tile
    position: Position
    orientation: TileOrientation = TileOrientation.LEFT_RIGHT

    @property
    def is_castle(self) -> bool:
        return isinstance(self.tile, CastleTile)


def castle_placement() -> TilePlacement:
    """Return the placement every kingdom starts with."""
    return TilePlacement(tile=CASTLE, position=ORIGIN, orientation=TileOrientation.LEFT_RIGHT)
