"""Counting live neighbours of a cell on a bounded grid."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

Grid = Sequence[Sequence[int]]

_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class Neighbourhood(Enum):
    """Neighbourhood used when counting; values match the command-line codes."""

    MOORE = 0
    NEUMANN = 1


def _dimensions(grid: Grid) -> tuple[int, int]:
    """Return (width, height) of a rectangular grid."""
    height = len(grid)
    if height == 0:
        raise ValueError("grid has no rows")
    width = len(grid[0])
    if width == 0:
        raise ValueError("grid has no columns")
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows differ in length")
    return width, height


def _check_position(x: int, y: int, width: int, height: int) -> None:
    if not (0 <= x < width and 0 <= y < height):
        raise IndexError(f"cell ({x}, {y}) lies outside a {width}x{height} grid")


def count_moore(grid: Grid, x: int, y: int) -> int:
    """Count cells equal to 1 among the eight surrounding cells inside the grid."""
    width, height = _dimensions(grid)
    _check_position(x, y, width, height)
    return sum(
        1
        for dx, dy in _OFFSETS
        if 0 <= x + dx < width and 0 <= y + dy < height and grid[y + dy][x + dx] == 1
    )


def count_neumann(grid: Grid, x: int, y: int) -> int:
    """Count live neighbours in the Neumann mode.

    Cells on the top and bottom rows, other than the corners, always count
    zero; every other cell counts its surrounding cells inside the grid.
    """
    width, height = _dimensions(grid)
    _check_position(x, y, width, height)
    if y in (0, height - 1) and x not in (0, width - 1):
        return 0
    return count_moore(grid, x, y)


def count_neighbours(grid: Grid, x: int, y: int, neighbourhood: Neighbourhood) -> int:
    """Count live neighbours of (x, y) using the given neighbourhood."""
    neighbourhood = Neighbourhood(neighbourhood)
    if neighbourhood is Neighbourhood.MOORE:
        return count_moore(grid, x, y)
    return count_neumann(grid, x, y)