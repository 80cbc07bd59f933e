"""Command-line entry point for the cellular automaton."""

from __future__ import annotations

import re
import subprocess
import sys
from typing import Sequence

from .neighbours import Neighbourhood
from .pngio import ImageFormatError, read_png
from .simulator import (
    ANSI_BOLD_WHITE,
    ANSI_COLOR_RED,
    ANSI_COLOR_RESET,
    DEFAULT_DIRECTORY,
    make_gif,
    simulate,
    usage,
)
from .txtio import GridFormatError, read_txt

PNG_INPUT = 2
TXT_INPUT = 3

_METHOD_NAMES = {
    Neighbourhood.MOORE: "Moore'a",
    Neighbourhood.NEUMANN: "Neumann",
}


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way: anything else counts as zero."""
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _error(message: str) -> None:
    print(f"{ANSI_COLOR_RED}{message}{ANSI_COLOR_RESET}")
    print(usage(), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments and return an exit code."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args:
        print(usage(), end="")
        return -1
    if len(args) < 5:
        _error("Nie poprawna ilość argumentów")
        return -2
    if len(args) > 5:
        _error("Za dużo argumentów")
        return -3

    method_code, kind_code, source, output, count = args
    generations = _atoi(count)
    if generations < 0:
        _error("Nie wolno wprowadzic ujemna liczbe generacji")
        return -4

    try:
        neighbourhood = Neighbourhood(_atoi(method_code))
    except ValueError:
        return 0
    kind = _atoi(kind_code)
    if kind not in (PNG_INPUT, TXT_INPUT):
        return 0

    reader = read_png if kind == PNG_INPUT else read_txt
    try:
        grid = reader(source)
    except FileNotFoundError:
        print(f"Podany plik {ANSI_BOLD_WHITE} {source} {ANSI_COLOR_RESET} nie istnieje",
              file=sys.stderr)
        return 1
    except (ImageFormatError, GridFormatError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Plik o nazwie {ANSI_BOLD_WHITE} {source} {ANSI_COLOR_RESET} został wczytany")

    simulate(grid, generations, output, neighbourhood, DEFAULT_DIRECTORY)
    try:
        make_gif(DEFAULT_DIRECTORY)
    except (OSError, subprocess.CalledProcessError, ValueError) as exc:
        print(f"Nie udalo sie stworzyc pliku gif: {exc}", file=sys.stderr)

    print(f"Tworzenie folderu{ANSI_BOLD_WHITE} wynik{ANSI_COLOR_RESET}...")
    print(
        f"Plik gif o nazwie{ANSI_BOLD_WHITE} out.gif{ANSI_COLOR_RESET} zostal stworzony "
        f"z pomocą metody {_METHOD_NAMES[neighbourhood]}"
    )
    print(f"Zeby popatrzyc wyniki, prosze wejsc w katalog{ANSI_BOLD_WHITE} wynik{ANSI_COLOR_RESET}")
    return 0


if __name__ == "__main__":
    sys.exit(main())