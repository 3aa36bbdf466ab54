"""Enumerations for the kingdom domain."""

from __future__ import annotations

from enum import StrEnum


class TileType(StrEnum):
    """Terrain kinds printed on domino halves."""

    FOREST = "forest"
    WHEAT = "wheat"
    WATER = "water"
    GRASSLAND = "grassland"
    SWAMP = "swamp"
    MOUNTAIN = "mountain"


class TileOrientation(StrEnum):
    """Rotation of a placed domino relative to its anchor cell.

    The anchor cell always holds the first half. The orientation decides where
    the second half goes.
    """

    LEFT_RIGHT = "left_right"  # second half to the right
    TOP_BOTTOM = "top_bottom"  # rotated 90 degrees clockwise; second half one row up
    RIGHT_LEFT = "right_left"  # rotated 180 degrees; second half to the left
    BOTTOM_TOP = "bottom_top"  # rotated 270 degrees clockwise; second half one row down


class TilePlacementError(StrEnum):
    """Reasons a proposed placement is rejected."""

    OVERLAPS_EXISTING_TILE = "overlaps_existing_tile"
    NO_MATCHING_ADJACENT_TILE = "no_matching_adjacent_tile"
    OUT_OF_BOUNDS = "out_of_bounds"
