"""The fixed set of dominoes shipped with the game.

Entries are listed in the order of the numbers printed on the tile backs, so
``ALL_DOMINOES[n - 1]`` is domino number ``n``. The table is read-only; the
draw and deal logic builds its own supply from it.
"""

from __future__ import annotations

from collections import Counter

from .enums import TileType
from .models import Domino, DominoSide

CATALOG_SIZE = 48

_F = TileType.FOREST
_WH = TileType.WHEAT
_WA = TileType.WATER
_G = TileType.GRASSLAND
_S = TileType.SWAMP
_M = TileType.MOUNTAIN


def _domino(first: TileType, first_crowns: int, second: TileType, second_crowns: int) -> Domino:
    return Domino(DominoSide(first, first_crowns), DominoSide(second, second_crowns))


ALL_DOMINOES: tuple[Domino, ...] = (
    # Plain, single terrain
    _domino(_WH, 0, _WH, 0),
    _domino(_WH, 0, _WH, 0),
    _domino(_F, 0, _F, 0),
    _domino(_F, 0, _F, 0),
    _domino(_F, 0, _F, 0),
    _domino(_F, 0, _F, 0),
    _domino(_WA, 0, _WA, 0),
    _domino(_WA, 0, _WA, 0),
    _domino(_WA, 0, _WA, 0),
    _domino(_G, 0, _G, 0),
    _domino(_G, 0, _G, 0),
    _domino(_S, 0, _S, 0),
    # Plain, mixed terrain
    _domino(_WH, 0, _F, 0),
    _domino(_WH, 0, _WA, 0),
    _domino(_WH, 0, _G, 0),
    _domino(_WH, 0, _S, 0),
    _domino(_F, 0, _WA, 0),
    _domino(_F, 0, _G, 0),
    # One crown
    _domino(_WH, 1, _F, 0),
    _domino(_WH, 1, _WA, 0),
    _domino(_WH, 1, _G, 0),
    _domino(_WH, 1, _S, 0),
    _domino(_WH, 1, _M, 0),
    _domino(_F, 1, _WH, 0),
    _domino(_F, 1, _WH, 0),
    _domino(_F, 1, _WH, 0),
    _domino(_F, 1, _WH, 0),
    _domino(_F, 1, _WA, 0),
    _domino(_F, 1, _G, 0),
    _domino(_WA, 1, _WH, 0),
    _domino(_WA, 1, _WH, 0),
    _domino(_WA, 1, _F, 0),
    _domino(_WA, 1, _F, 0),
    _domino(_WA, 1, _F, 0),
    _domino(_WA, 1, _F, 0),
    _domino(_WH, 0, _G, 1),
    _domino(_WA, 0, _G, 1),
    _domino(_WH, 0, _S, 1),
    _domino(_G, 0, _S, 1),
    _domino(_M, 1, _WH, 1),
    # Two or more crowns
    _domino(_WH, 0, _G, 2),
    _domino(_WA, 0, _G, 2),
    _domino(_WH, 0, _S, 2),
    _domino(_G, 0, _S, 2),
    _domino(_M, 2, _WH, 0),
    _domino(_S, 0, _M, 2),
    _domino(_S, 0, _M, 2),
    _domino(_WH, 0, _M, 3),
)

assert len(ALL_DOMINOES) == CATALOG_SIZE


def domino_number(number: int) -> Domino:
    """Return the domino printed with ``number`` (1-based)."""

    if not 1 <= number <= CATALOG_SIZE:
        raise ValueError(f"domino number must be between 1 and {CATALOG_SIZE}, got {number}")
    return ALL_DOMINOES[number - 1]


def terrain_counts() -> Counter[TileType]:
    """Count how many domino halves of each terrain kind the catalog holds."""

    return Counter(side.tile_type for domino in ALL_DOMINOES for side in domino.sides)


def total_crowns() -> int:
    """Sum of crowns printed across the whole catalog."""

    return sum(domino.crown_count for domino in ALL_DOMINOES)
