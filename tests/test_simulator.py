from pathlib import Path
from unittest import mock

import pytest

from lifegrid.neighbours import Neighbourhood
from lifegrid.pngio import read_png
from lifegrid.rules import next_generation
from lifegrid.simulator import make_gif, simulate, usage

VERTICAL = [
    [0, 0, 0, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 0, 0, 0],
]
HORIZONTAL = [
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
    [0, 1, 1, 1, 0],
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
]


def _read_generation(path: Path) -> list[list[int]]:
    return [[int(v) for v in line.split()] for line in path.read_text().splitlines()]


def test_blinker_files(tmp_path):
    result = simulate(VERTICAL, 2, "out", Neighbourhood.MOORE, tmp_path)
    assert [p.name for p in result.png_paths] == ["out_0.png", "out_1.png"]
    assert [p.name for p in result.txt_paths] == ["wynik_0.txt", "wynik_1.txt"]
    assert read_png(tmp_path / "out_0.png") == VERTICAL
    assert read_png(tmp_path / "out_1.png") == HORIZONTAL
    assert _read_generation(tmp_path / "wynik_0.txt") == HORIZONTAL
    assert _read_generation(tmp_path / "wynik_1.txt") == VERTICAL
    assert result.grid == VERTICAL


def test_text_format_has_trailing_spaces(tmp_path):
    simulate(VERTICAL, 1, "out", Neighbourhood.MOORE, tmp_path)
    first_line = (tmp_path / "wynik_0.txt").read_text().splitlines()[0]
    assert first_line == "0 " * 5


def test_neumann_matches_rule(tmp_path):
    grid = [[1, 1, 0], [1, 0, 0], [0, 1, 1]]
    result = simulate(grid, 1, "n", Neighbourhood.NEUMANN, tmp_path)
    assert result.grid == next_generation(grid, Neighbourhood.NEUMANN)


def test_zero_generations_writes_nothing(tmp_path):
    target = tmp_path / "wynik"
    result = simulate(VERTICAL, 0, "out", Neighbourhood.MOORE, target)
    assert result.grid == VERTICAL
    assert list(target.iterdir()) == []


def test_negative_generations_rejected(tmp_path):
    with pytest.raises(ValueError):
        simulate(VERTICAL, -1, "out", Neighbourhood.MOORE, tmp_path)


def test_accepts_integer_neighbourhood(tmp_path):
    result = simulate(VERTICAL, 1, "out", 0, tmp_path)
    assert result.grid == HORIZONTAL


def test_make_gif_orders_frames_naturally(tmp_path):
    for index in (10, 2, 0, 1):
        (tmp_path / f"out_{index}.png").write_bytes(b"")
    (tmp_path / "wynik_0.txt").write_text("")
    with mock.patch("lifegrid.simulator.subprocess.run") as run:
        gif = make_gif(tmp_path)
    assert gif == tmp_path / "out.gif"
    command = run.call_args.args[0]
    assert command[:5] == ["convert", "-delay", "15", "-loop", "0"]
    assert command[5:-1] == [str(tmp_path / f"out_{i}.png") for i in (0, 1, 2, 10)]
    assert command[-1] == str(gif)


def test_make_gif_without_frames(tmp_path):
    with pytest.raises(ValueError):
        make_gif(tmp_path)


def test_usage_describes_arguments():
    text = usage()
    assert "Usage: " in text
    assert "./game 0 2 dane/input.png out 200" in text
    assert text.endswith("\n")