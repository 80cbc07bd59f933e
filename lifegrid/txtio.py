"""Reading grids from text files and writing generations as text."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]


class GridFormatError(ValueError):
    """Raised when a text file does not describe a grid."""


def read_txt(path: PathLike) -> list[list[int]]:
    """Read a grid from a text file.

    The file starts with the width and the height, followed by the cell
    values row by row, all separated by whitespace. Values beyond
    ``width * height`` are ignored.
    """
    path = Path(path)
    tokens = path.read_text(encoding="utf-8").split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise GridFormatError(f"{path} holds a value that is not an integer") from exc

    if len(numbers) < 2:
        raise GridFormatError(f"{path} lacks the width and height header")
    width, height = numbers[0], numbers[1]
    if width <= 0 or height <= 0:
        raise GridFormatError(f"{path} gives an invalid size {width}x{height}")

    cells = numbers[2 : 2 + width * height]
    if len(cells) < width * height:
        raise GridFormatError(
            f"{path} holds {len(cells)} cells, {width * height} expected"
        )
    return [cells[start : start + width] for start in range(0, len(cells), width)]


def write_txt(grid: Sequence[Sequence[int]], path: PathLike) -> Path:
    """Write ``grid`` as text: each value followed by a space, one row per line."""
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows differ in length")
    text = "".join("".join(f"{cell:d} " for cell in row) + "\n" for row in grid)
    path = Path(path)
    with path.open("w", encoding="ascii", newline="") as handle:
        handle.write(text)
    return path