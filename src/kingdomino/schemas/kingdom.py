from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from kingdomino.domain.enums import TileOrientation, TileType
from kingdomino.domain.geometry import placement_cells
from kingdomino.domain.kingdom import Kingdom
from kingdomino.domain.models import Domino, DominoSide, TilePlacement
from kingdomino.utils.grid_math import Position


class PositionRead(BaseModel):
    x: int = Field(..., description="Column, growing to the right")
    y: int = Field(..., description="Row, growing downwards")

    @classmethod
    def from_position(cls, position: Position) -> PositionRead:
        return cls(x=position.x, y=position.y)


class DominoSideRead(BaseModel):
    tile_type: TileType = Field(..., description="Terrain kind of this half")
    crown_count: int = Field(default=0, ge=0, description="Crowns printed on this half")

    @classmethod
    def from_side(cls, side: DominoSide) -> DominoSideRead:
        return cls(tile_type=side.tile_type, crown_count=side.crown_count)


class PlacementRead(BaseModel):
    index: int = Field(..., ge=0, description="Position in the placement log (0 is the castle)")
    kind: Literal["castle", "domino"] = Field(..., description="Which tile was placed")
    position: PositionRead = Field(..., description="Anchor cell, holding the first half")
    orientation: TileOrientation | None = Field(
        None, description="Rotation of a domino; None for the castle"
    )
    sides: list[DominoSideRead] = Field(
        default_factory=list, description="Domino halves in anchor-first order"
    )
    cells: list[PositionRead] = Field(..., description="Cells covered, anchor first")

    @classmethod
    def from_placement(cls, index: int, placement: TilePlacement) -> PlacementRead:
        cells = [PositionRead.from_position(cell) for cell in placement_cells(placement)]
        if isinstance(placement.tile, Domino):
            return cls(
                index=index,
                kind="domino",
                position=PositionRead.from_position(placement.position),
                orientation=placement.orientation,
                sides=[DominoSideRead.from_side(side) for side in placement.tile.sides],
                cells=cells,
            )
        return cls(
            index=index,
            kind="castle",
            position=PositionRead.from_position(placement.position),
            cells=cells,
        )


class KingdomRead(BaseModel):
    board_size: int = Field(..., ge=3, description="Cells per side of the legal board")
    placements: list[PlacementRead] = Field(
        default_factory=list, description="Committed placements in placement order"
    )
    occupied_cell_count: int = Field(..., ge=1, description="Number of occupied cells")

    @classmethod
    def from_kingdom(cls, kingdom: Kingdom) -> KingdomRead:
        return cls(
            board_size=kingdom.rules.board_size,
            placements=[
                PlacementRead.from_placement(index, placement)
                for index, placement in enumerate(kingdom)
            ],
            occupied_cell_count=len(kingdom.occupied_positions),
        )
