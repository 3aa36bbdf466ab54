"""Unit tests for tile and placement value types."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kingdomino.domain import enums as de
from kingdomino.domain import models as dm
from kingdomino.utils.grid_math import ORIGIN, Position

sides = st.builds(
    dm.DominoSide,
    tile_type=st.sampled_from(de.TileType),
    crown_count=st.integers(min_value=0, max_value=3),
)
dominoes = st.builds(dm.Domino, first=sides, second=sides)


def test_domino_side_defaults_to_no_crowns():
    side = dm.DominoSide(de.TileType.SWAMP)
    assert side.crown_count == 0


def test_domino_side_rejects_negative_crowns():
    with pytest.raises(ValueError, match="crown_count must be non-negative"):
        dm.DominoSide(de.TileType.FOREST, -1)


def test_flip_swaps_halves_without_mutating():
    domino = dm.Domino(
        dm.DominoSide(de.TileType.WHEAT, 0),
        dm.DominoSide(de.TileType.FOREST, 1),
    )
    flipped = domino.flip()
    assert flipped.first == dm.DominoSide(de.TileType.FOREST, 1)
    assert flipped.second == dm.DominoSide(de.TileType.WHEAT, 0)
    assert domino.first.tile_type == de.TileType.WHEAT


def test_domino_crown_count_sums_halves():
    domino = dm.Domino(
        dm.DominoSide(de.TileType.MOUNTAIN, 1),
        dm.DominoSide(de.TileType.WHEAT, 1),
    )
    assert domino.crown_count == 2
    assert domino.sides == (domino.first, domino.second)


@given(dominoes)
def test_flip_is_an_involution(domino):
    assert domino.flip().flip() == domino


@given(dominoes)
def test_flip_changes_asymmetric_dominoes(domino):
    if domino.first != domino.second:
        assert domino.flip() != domino
    else:
        assert domino.flip() == domino


def test_castle_is_a_singleton_value():
    assert dm.CastleTile() == dm.CASTLE


def test_castle_placement_sits_at_origin():
    placement = dm.castle_placement()
    assert placement.tile == dm.CASTLE
    assert placement.position == ORIGIN
    assert placement.is_castle


def test_domino_placement_defaults_to_left_right():
    domino = dm.Domino(dm.DominoSide(de.TileType.WATER), dm.DominoSide(de.TileType.WATER))
    placement = dm.TilePlacement(tile=domino, position=Position(1, 0))
    assert placement.orientation == de.TileOrientation.LEFT_RIGHT
    assert not placement.is_castle


def test_orientation_enumeration_order():
    assert list(de.TileOrientation) == [
        de.TileOrientation.LEFT_RIGHT,
        de.TileOrientation.TOP_BOTTOM,
        de.TileOrientation.RIGHT_LEFT,
        de.TileOrientation.BOTTOM_TOP,
    ]
