# lifegrid

The Game of Life on a finite grid. The starting board comes from a PNG
image or a text file. The package runs a chosen number of generations in
one of two neighbourhood modes, Moore or Neumann. It writes every
generation to a `wynik` directory as a black-and-white PNG frame and as a
text dump of the grid. At the end it asks ImageMagick to join the frames
into an animated GIF.

## Installation

```
pip install .
```

The GIF step runs ImageMagick's `convert` command, so `convert` must be on
your `PATH`. Without it the simulation still runs and the PNG and text files
are still written. Only the GIF is missing, and the command prints a message
on standard error.

## Command line

The `lifegrid` command takes exactly five arguments:

```
lifegrid METHOD INPUT_KIND INPUT_FILE OUTPUT_NAME GENERATIONS
```

| Argument      | Meaning                                                    |
|---------------|------------------------------------------------------------|
| `METHOD`      | `0` selects the Moore mode, `1` selects the Neumann mode   |
| `INPUT_KIND`  | `2` reads a PNG file, `3` reads a text file                |
| `INPUT_FILE`  | path to the starting board                                 |
| `OUTPUT_NAME` | base name of the PNG frames                                |
| `GENERATIONS` | number of generations to run; it must not be negative      |

Example:

```
lifegrid 0 2 dane/input.png out 200
```

The numeric arguments are read by taking their leading integer. Text that
does not start with a number counts as `0`.

### What gets written

Everything goes into the `wynik` directory in the current working
directory. The command creates that directory if it is missing. For each
step `i` from `0` to `GENERATIONS - 1` it writes two files:

- `<OUTPUT_NAME>_<i>.png`, the grid before the step;
- `wynik_<i>.txt`, the grid after the step.

Finally it builds `wynik/out.gif` from all PNG files in `wynik`, taken in
natural order of their names.

### Exit status

| Situation                                    | Value `main` returns |
|----------------------------------------------|----------------------|
| no arguments (usage text is printed)         | `-1`                 |
| fewer than five arguments                    | `-2`                 |
| more than five arguments                     | `-3`                 |
| negative generation count                    | `-4`                 |
| input file missing or not readable as a grid | `1`                  |
| success                                      | `0`                  |

In the cases that return `-2`, `-3` and `-4`, the command first prints an
error message and then the usage text. If `METHOD` is not `0` or `1`, or
`INPUT_KIND` is not `2` or `3`, the command does nothing and returns `0`.

## Input formats

- **PNG**: the image is converted to RGBA. A pixel whose red channel is 0 is
  a live cell (`1`). Every other pixel is a dead cell (`0`). A file that
  lacks the PNG signature, or that cannot be decoded, raises
  `lifegrid.pngio.ImageFormatError`.
- **Text**: the file starts with the width and then the height. The cell
  values follow row by row. All values are separated by whitespace. Values
  beyond `width * height` are ignored. `lifegrid.txtio.GridFormatError` is
  raised in these cases:
  - a value is not an integer;
  - the header is missing;
  - the size is not positive;
  - there are too few cells.

## Rules

- A dead cell (`0`) with exactly three live neighbours becomes live.
- A live cell (`1`) with two or three live neighbours stays live.
- Any other live cell dies.
- Any other value stays as it is.

Neighbours are counted in one of two modes:

- **Moore** (`Neighbourhood.MOORE`, code `0`): the eight surrounding cells.
  Cells outside the grid count as dead.
- **Neumann** (`Neighbourhood.NEUMANN`, code `1`): the same count as Moore,
  with one exception. Cells on the top and bottom rows that are not corners
  always count zero live neighbours.

## Library use

- `lifegrid.neighbours`
  - `Neighbourhood`
  - `count_moore(grid, x, y)`
  - `count_neumann(grid, x, y)`
  - `count_neighbours(grid, x, y, neighbourhood)`
  - The counting functions raise `ValueError` for an empty or ragged grid.
  - They raise `IndexError` for a position outside the grid.
- `lifegrid.rules`
  - `next_generation(grid, neighbourhood)` returns a new grid.
  - `evolve(grid, neighbourhood, generations)` yields the following
    generations.
  - `evolve` raises `ValueError` for a negative count.
- `lifegrid.pngio`
  - `read_png(path)`
  - `write_png(grid, path)` writes an 8-bit greyscale image: cells equal to
    `1` are black, all others white.
- `lifegrid.txtio`
  - `read_txt(path)`
  - `write_txt(grid, path)` writes each value followed by a space, one row
    per line.
- `lifegrid.simulator`
  - `simulate(grid, generations, output, neighbourhood, directory)` writes
    the files described above and returns a `SimulationResult`, which holds
    the last `grid`, `png_paths` and `txt_paths`.
  - `make_gif(directory)` runs `convert` and returns the path of `out.gif`.
    It raises `ValueError` when there are no frames.
  - `usage()` returns the help text.
- `lifegrid.cli`
  - `main(argv=None)` is the command-line entry point.

```python
from lifegrid.neighbours import Neighbourhood
from lifegrid.rules import next_generation

blinker = [
    [0, 0, 0, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 0, 0, 0],
]
print(next_generation(blinker, Neighbourhood.MOORE))
```

## What it does not do

- The package does not encode GIFs itself. It relies on the external
  `convert` program.
- The output directory for the command is always `wynik`.
- The help text and the messages are in Polish.

## Running the tests

```
pip install .[test]
pytest
```