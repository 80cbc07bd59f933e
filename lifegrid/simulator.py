"""Running a simulation and writing each generation to disk."""

from __future__ import annotations

import os
import re
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from .neighbours import Grid, Neighbourhood
from .pngio import write_png
from .rules import evolve
from .txtio import write_txt

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_DIRECTORY = "wynik"
GIF_NAME = "out.gif"
GIF_DELAY = 15

ANSI_COLOR_RED = "\x1b[31m"
ANSI_COLOR_GREEN = "\x1b[32m"
ANSI_COLOR_MAGENTA = "\x1b[35m"
ANSI_COLOR_RESET = "\x1b[0m"
ANSI_BOLD_WHITE = "\033[01;37m"


@dataclass
class SimulationResult:
    """What a simulation produced: the last grid and the files written."""

    grid: list[list[int]]
    png_paths: list[Path] = field(default_factory=list)
    txt_paths: list[Path] = field(default_factory=list)


def simulate(
    grid: Grid,
    generations: int,
    output: str,
    neighbourhood: Neighbourhood = Neighbourhood.MOORE,
    directory: PathLike = DEFAULT_DIRECTORY,
) -> SimulationResult:
    """Run ``generations`` steps, writing images and text files to ``directory``.

    At step ``i`` the current grid is written as ``<output>_<i>.png``, then the
    next generation is computed and written as ``wynik_<i>.txt``.
    """
    neighbourhood = Neighbourhood(neighbourhood)
    steps = evolve(grid, neighbourhood, generations)
    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)

    result = SimulationResult(grid=[list(row) for row in grid])
    current: Grid = grid
    for index, following in enumerate(steps):
        result.png_paths.append(write_png(current, target / f"{output}_{index}.png"))
        result.txt_paths.append(write_txt(following, target / f"wynik_{index}.txt"))
        current = following
    result.grid = [list(row) for row in current]
    return result


def _natural_key(path: Path) -> list[object]:
    return [
        int(part) if part.isdigit() else part
        for part in re.split(r"(\d+)", path.name)
    ]


def make_gif(directory: PathLike = DEFAULT_DIRECTORY) -> Path:
    """Join the PNG frames in ``directory`` into an animated ``out.gif``.

    Frames are taken in natural order of their names and joined by the
    ImageMagick ``convert`` command.
    """
    target = Path(directory)
    frames = sorted(target.glob("*.png"), key=_natural_key)
    if not frames:
        raise ValueError(f"no PNG frames found in {target}")
    gif = target / GIF_NAME
    command = [
        "convert",
        "-delay",
        str(GIF_DELAY),
        "-loop",
        "0",
        *(str(frame) for frame in frames),
        str(gif),
    ]
    subprocess.run(command, check=True)
    return gif


def usage() -> str:
    """Return the help text describing the command-line arguments."""
    bw, mg, gr, rs = ANSI_BOLD_WHITE, ANSI_COLOR_MAGENTA, ANSI_COLOR_GREEN, ANSI_COLOR_RESET
    parts = [
        "Żeby urochomić program proszę wprowadzić 5 argumentów\n",
        f"{bw} \n",
        f"{mg}Usage: {rs}",
        bw,
        f"{mg}\n\tPierwszy argument: {rs}",
        f"{bw} \n0{rs} – To zaczyna się generacja za pomocą metody {gr}Moore'a{rs}",
        f"{bw} \n1{rs} – To zaczyna się generacja za pomocą metody {gr}Neumanna{rs}",
        f"{bw} \n",
        f"{mg}\n\tDrugi argument: {rs}",
        f"{bw} \n2{rs} – Czyta {gr}.png{rs} plik",
        f"{bw} \n3{rs} – Czyta {gr}.txt{rs} plik",
        f"{bw} \n",
        f"{mg}\n\tTrzeci argument: {rs}",
        f"\nWprowadź{gr} plik{rs} wejściowy{gr} .txt{rs} lub{gr} .png{rs}",
        f" znajdujący w folderze{gr} dane{rs} w zależności od drugiego argumentu",
        f"{bw} \n",
        f"{mg}\n\tCzwarty argument: {rs}",
        f"\nWprowadź{gr} nazwę pliku{rs} wyjściowego",
        f"{bw} \n",
        f"{mg}\n\tPiąty argument: {rs}",
        f"\nWprowadź{gr} liczbę generacji{rs}",
        f"{bw} \n",
        f"{mg}\n\tPrzykładowe wywołanie programu: {rs}",
        f"{bw} \n./game 0 2 dane/input.png out 200",
        "\n",
        f"{mg}\n\tOczyszczenie stworzonych plików,obrazków oraz folderu: {rs}",
        f"{bw} \nmake clean\x1b[0m",
        "\n",
    ]
    return "".join(parts)