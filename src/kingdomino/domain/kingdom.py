"""A single player's kingdom and the rules for growing it.

The kingdom keeps two pieces of state:

* ``_placements`` - an append-only log of committed placements. Index 0 is
  always the castle at the origin.
* ``_grid`` - a sparse index from every occupied cell to the log index of the
  placement covering it.

Placement attempts are validated in a fixed order (bounds, overlap,
adjacency) and either fully committed or rejected without touching state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from kingdomino.utils.grid_math import ORIGIN, Position, grid_neighbors, within_extent

from .enums import TileOrientation, TilePlacementError, TileType
from .geometry import placement_cells, placement_squares
from .models import CastleTile, Domino, DominoSide, Square, TilePlacement, castle_placement
from .rules_config import DEFAULT_RULES, KingdomRules, RulesConfig

logger = logging.getLogger(__name__)

_ORIENTATION_ORDER = {orientation: rank for rank, orientation in enumerate(TileOrientation)}


@dataclass(slots=True)
class PlacementValidation:
    """Simple structure describing placement validation results."""

    valid: bool
    error: TilePlacementError | None = None


class InvalidPlacementError(ValueError):
    """Raised by :meth:`Kingdom.place` when a placement is rejected."""

    def __init__(self, reason: TilePlacementError, placement: TilePlacement) -> None:
        super().__init__(f"cannot place {placement!r}: {reason.value}")
        self.reason = reason
        self.placement = placement


def _squares_match(candidate: DominoSide, neighbour: Square) -> bool:
    match neighbour:
        case CastleTile():
            return True
        case DominoSide(tile_type=tile_type):
            return tile_type == candidate.tile_type
    raise TypeError(f"unsupported square: {neighbour!r}")


class Kingdom:
    """One player's board."""

    def __init__(self, rules: RulesConfig = DEFAULT_RULES) -> None:
        self._rules: KingdomRules = rules.kingdom
        self._placements: list[TilePlacement] = [castle_placement()]
        self._grid: dict[Position, int] = {ORIGIN: 0}

    def __repr__(self) -> str:
        return (
            f"Kingdom(board_size={self._rules.board_size}, "
            f"placements={len(self._placements)}, cells={len(self._grid)})"
        )

    def __len__(self) -> int:
        return len(self._placements)

    def __iter__(self) -> Iterator[TilePlacement]:
        return iter(self._placements)

    # --- Read access -------------------------------------------------------------

    @property
    def rules(self) -> KingdomRules:
        return self._rules

    @property
    def placements(self) -> tuple[TilePlacement, ...]:
        """Committed placements in the order they were made."""
        return tuple(self._placements)

    @property
    def grid_index(self) -> dict[Position, int]:
        """Copy of the cell -> placement index mapping."""
        return dict(self._grid)

    @property
    def occupied_positions(self) -> frozenset[Position]:
        return frozenset(self._grid)

    def is_occupied(self, position: Position) -> bool:
        return position in self._grid

    def placement_index_at(self, position: Position) -> int | None:
        return self._grid.get(position)

    def placement_at(self, position: Position) -> TilePlacement | None:
        """Return the placement covering ``position``, if any."""
        index = self._grid.get(position)
        if index is None:
            return None
        assert index < len(self._placements), f"grid entry {position} points past the log"
        return self._placements[index]

    def square_at(self, position: Position) -> Square | None:
        """Return what sits on a cell: the castle, a domino half, or nothing."""
        placement = self.placement_at(position)
        if placement is None:
            return None
        squares = dict(placement_squares(placement))
        assert position in squares, f"placement indexed at {position} does not cover it"
        return squares[position]

    def tile_type_at(self, position: Position) -> TileType | None:
        """Return the terrain on a cell, or ``None`` for the castle and empty cells."""
        square = self.square_at(position)
        if isinstance(square, DominoSide):
            return square.tile_type
        return None

    def frontier(self) -> list[Position]:
        """Empty in-bounds cells that touch an occupied cell, sorted by row then column."""
        cells = {
            neighbour
            for position in self._grid
            for neighbour in grid_neighbors(position)
            if neighbour not in self._grid and self._in_bounds(neighbour)
        }
        return sorted(cells, key=lambda p: (p.y, p.x))

    # --- Validation --------------------------------------------------------------

    def validate(self, placement: TilePlacement) -> PlacementValidation:
        """Check a domino placement against the current board without committing it."""

        if placement.is_castle:
            raise ValueError("the castle is placed when the kingdom is created")

        cells = placement_cells(placement)

        if not all(self._in_bounds(cell) for cell in cells):
            return PlacementValidation(False, TilePlacementError.OUT_OF_BOUNDS)

        if any(cell in self._grid for cell in cells):
            return PlacementValidation(False, TilePlacementError.OVERLAPS_EXISTING_TILE)

        if not self._has_matching_neighbour(placement):
            return PlacementValidation(False, TilePlacementError.NO_MATCHING_ADJACENT_TILE)

        return PlacementValidation(True)

    def _in_bounds(self, position: Position) -> bool:
        return within_extent(position, self._rules.half_width)

    def _has_matching_neighbour(self, placement: TilePlacement) -> bool:
        for cell, square in placement_squares(placement):
            assert isinstance(square, DominoSide)
            for neighbour in grid_neighbors(cell):
                existing = self.square_at(neighbour)
                if existing is not None and _squares_match(square, existing):
                    return True
        return False

    # --- Mutation ----------------------------------------------------------------

    def attempt_place(self, placement: TilePlacement) -> PlacementValidation:
        """Validate a placement and commit it if every rule passes.

        On rejection the kingdom is left exactly as it was.
        """

        result = self.validate(placement)
        if not result.valid:
            logger.debug("rejected %r: %s", placement, result.error)
            return result

        index = len(self._placements)
        cells = placement_cells(placement)
        self._placements.append(placement)
        for cell in cells:
            assert cell not in self._grid, f"{cell} already indexed"
            self._grid[cell] = index

        logger.debug(
            "placed %r at %s as #%d (%d cells occupied)",
            placement.tile,
            [cell.as_tuple() for cell in cells],
            index,
            len(self._grid),
        )
        return result

    def place(self, placement: TilePlacement) -> None:
        """Commit a placement or raise :class:`InvalidPlacementError`."""

        result = self.attempt_place(placement)
        if not result.valid:
            assert result.error is not None
            raise InvalidPlacementError(result.error, placement)

    # --- Queries over candidate moves --------------------------------------------

    def legal_placements(self, domino: Domino) -> list[TilePlacement]:
        """Every placement of ``domino`` that :meth:`validate` would accept.

        One of the two cells of a legal placement must touch the kingdom, so
        anchors are drawn from the frontier and the cells next to it.
        """

        frontier = self.frontier()
        anchors = set(frontier)
        for cell in frontier:
            anchors.update(
                neighbour for neighbour in grid_neighbors(cell) if neighbour not in self._grid
            )

        legal = []
        for anchor in anchors:
            for orientation in TileOrientation:
                candidate = TilePlacement(tile=domino, position=anchor, orientation=orientation)
                if self.validate(candidate).valid:
                    legal.append(candidate)

        legal.sort(
            key=lambda p: (p.position.y, p.position.x, _ORIENTATION_ORDER[p.orientation])
        )
        return legal

    def can_place(self, domino: Domino) -> bool:
        """Whether ``domino`` fits anywhere on the board."""
        return bool(self.legal_placements(domino))

    def is_full(self) -> bool:
        return len(self._grid) >= self._rules.max_cells
