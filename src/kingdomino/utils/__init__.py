"""Utility functions for the Kingdomino board model."""

from kingdomino.utils.grid_math import (
    ORIGIN,
    Position,
    chebyshev_offset,
    grid_neighbors,
    step,
    within_extent,
)

__all__ = [
    "ORIGIN",
    "Position",
    "chebyshev_offset",
    "grid_neighbors",
    "step",
    "within_extent",
]
