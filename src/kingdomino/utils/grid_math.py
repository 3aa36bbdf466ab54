"""
Square grid coordinate mathematics for a Kingdomino kingdom.

A kingdom is laid out on an unbounded square grid whose origin holds the
castle. This module covers:
- The ``Position`` value type
- Single steps in the four cardinal directions
- Finding the orthogonal neighbours of a cell
- Measuring how far a cell lies from the origin, for board-extent checks

Coordinate System:
------------------
Cells use plain integer (x, y) coordinates.

   - x grows to the right
   - y grows downwards, so "up" means decreasing y

Neither axis is bounded here. The legal board extent is a placement rule and
lives in the rules configuration, not in the coordinate type.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """
    A cell on the kingdom grid.

    Attributes:
        x: Column coordinate (grows to the right)
        y: Row coordinate (grows downwards)

    Example:
        >>> origin = Position(x=0, y=0)
        >>> Position(x=1, y=0) in grid_neighbors(origin)
        True
    """

    x: int
    y: int

    def as_tuple(self) -> tuple[int, int]:
        """Return the position as an ``(x, y)`` tuple."""
        return self.x, self.y


ORIGIN = Position(0, 0)

# Unit vectors for the four orthogonal neighbours, in the order
# right, up, left, down.
_NEIGHBOR_DIRECTIONS: list[tuple[int, int]] = [
    (1, 0),  # Right
    (0, -1),  # Up
    (-1, 0),  # Left
    (0, 1),  # Down
]


def step(position: Position, dx: int, dy: int) -> Position:
    """Return the position offset by ``(dx, dy)``."""
    return Position(position.x + dx, position.y + dy)


def grid_neighbors(position: Position) -> list[Position]:
    """
    Find the 4 orthogonally adjacent cells of the given cell.

    The result always has exactly 4 entries (right, up, left, down). No
    filtering is applied: callers check the entries against the occupied
    cells and the board extent themselves.

    Args:
        position: The centre cell

    Returns:
        A list of 4 Position objects

    Example:
        >>> neighbors = grid_neighbors(Position(0, 0))
        >>> len(neighbors)
        4
        >>> Position(0, -1) in neighbors
        True
    """
    return [step(position, dx, dy) for dx, dy in _NEIGHBOR_DIRECTIONS]


def chebyshev_offset(position: Position, center: Position = ORIGIN) -> int:
    """
    Return the larger of the per-axis distances between two cells.

    A cell is inside a square board of half-width ``h`` centred on ``center``
    exactly when this value is at most ``h``.
    """
    return max(abs(position.x - center.x), abs(position.y - center.y))


def within_extent(position: Position, half_width: int, center: Position = ORIGIN) -> bool:
    """
    Check whether a cell lies on a square board centred on ``center``.

    Raises:
        ValueError: If half_width is negative

    Example:
        >>> within_extent(Position(2, -2), half_width=2)
        True
        >>> within_extent(Position(3, 0), half_width=2)
        False
    """
    if half_width < 0:
        msg = f"half_width must be non-negative, got {half_width}"
        raise ValueError(msg)
    return chebyshev_offset(position, center) <= half_width
