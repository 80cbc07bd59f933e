"""Reading and writing grids as PNG images."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence, Union

from PIL import Image

PathLike = Union[str, "os.PathLike[str]"]

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

ALIVE_PIXEL = 0
DEAD_PIXEL = 255


class ImageFormatError(ValueError):
    """Raised when a file is not a PNG image that can be decoded."""


def _dimensions(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    height = len(grid)
    if height == 0:
        raise ValueError("grid has no rows")
    width = len(grid[0])
    if width == 0:
        raise ValueError("grid has no columns")
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows differ in length")
    return width, height


def read_png(path: PathLike) -> list[list[int]]:
    """Read a PNG image into a grid.

    A pixel whose red channel is zero becomes a live cell (1); every other
    pixel becomes a dead cell (0).
    """
    path = Path(path)
    with path.open("rb") as handle:
        if handle.read(len(PNG_SIGNATURE)) != PNG_SIGNATURE:
            raise ImageFormatError(f"{path} is not recognised as a PNG file")
        handle.seek(0)
        try:
            with Image.open(handle) as image:
                image.load()
                rgba = image.convert("RGBA")
        except OSError as exc:
            raise ImageFormatError(f"{path} could not be decoded: {exc}") from exc

    width, _ = rgba.size
    reds = rgba.getchannel("R").tobytes()
    return [
        [1 if value == 0 else 0 for value in reds[start : start + width]]
        for start in range(0, len(reds), width)
    ]


def write_png(grid: Sequence[Sequence[int]], path: PathLike) -> Path:
    """Write ``grid`` as an 8-bit greyscale PNG: live cells black, others white."""
    width, height = _dimensions(grid)
    pixels = bytes(
        ALIVE_PIXEL if cell == 1 else DEAD_PIXEL for row in grid for cell in row
    )
    image = Image.frombytes("L", (width, height), pixels)
    path = Path(path)
    image.save(path, format="PNG")
    return path