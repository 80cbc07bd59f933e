"""The birth and survival rule applied to a whole grid."""

from __future__ import annotations

from typing import Iterator

from .neighbours import Grid, Neighbourhood, count_neighbours


def _next_state(state: int, alive: int) -> int:
    if state == 0 and alive == 3:
        return 1
    if state == 1:
        return 1 if alive in (2, 3) else 0
    return state


def next_generation(grid: Grid, neighbourhood: Neighbourhood) -> list[list[int]]:
    """Return the next generation of ``grid``; the input is left untouched.

    A dead cell with three live neighbours is born, a live cell with two or
    three survives, any other live cell dies and other values stay as they are.
    """
    return [
        [
            _next_state(state, count_neighbours(grid, x, y, neighbourhood))
            for x, state in enumerate(row)
        ]
        for y, row in enumerate(grid)
    ]


def evolve(
    grid: Grid, neighbourhood: Neighbourhood, generations: int
) -> Iterator[list[list[int]]]:
    """Yield ``generations`` successive generations following ``grid``."""
    if generations < 0:
        raise ValueError("number of generations must not be negative")

    def _run() -> Iterator[list[list[int]]]:
        current = grid
        for _ in range(generations):
            current = next_generation(current, neighbourhood)
            yield current

    return _run()