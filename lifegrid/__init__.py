"""Game of Life on grids read from PNG or text, with Moore and Neumann neighbour counting."""

__version__ = "0.1.0"