from pathlib import Path

import pytest
from PIL import Image

from lifegrid.pngio import ImageFormatError, read_png, write_png


GLIDER = [
    [0, 1, 0, 0],
    [0, 0, 1, 0],
    [1, 1, 1, 0],
]


def test_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "glider.png"
    write_png(GLIDER, target)
    assert read_png(target) == GLIDER


def test_written_image_is_greyscale_black_and_white(tmp_path: Path) -> None:
    target = write_png([[1, 0], [0, 1]], tmp_path / "out.png")
    with Image.open(target) as image:
        assert image.mode == "L"
        assert image.size == (2, 2)
        assert image.getpixel((0, 0)) == 0
        assert image.getpixel((1, 0)) == 255
        assert image.getpixel((0, 1)) == 255
        assert image.getpixel((1, 1)) == 0


def test_write_returns_path(tmp_path: Path) -> None:
    target = tmp_path / "a.png"
    assert write_png([[1]], str(target)) == target
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_read_rgba_uses_red_channel(tmp_path: Path) -> None:
    image = Image.new("RGBA", (3, 1))
    image.putpixel((0, 0), (0, 0, 0, 255))
    image.putpixel((1, 0), (255, 0, 0, 255))
    image.putpixel((2, 0), (0, 255, 255, 255))
    target = tmp_path / "colour.png"
    image.save(target)
    assert read_png(target) == [[1, 0, 1]]


def test_read_dimensions_follow_image(tmp_path: Path) -> None:
    target = tmp_path / "white.png"
    Image.new("RGB", (5, 2), (255, 255, 255)).save(target)
    assert read_png(target) == [[0] * 5, [0] * 5]


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_png(tmp_path / "nothing.png")


def test_non_png_file_raises(tmp_path: Path) -> None:
    target = tmp_path / "plain.png"
    target.write_text("3 3\n0 0 0\n", encoding="ascii")
    with pytest.raises(ImageFormatError):
        read_png(target)


def test_truncated_png_raises(tmp_path: Path) -> None:
    target = tmp_path / "broken.png"
    target.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 10)
    with pytest.raises(ImageFormatError):
        read_png(target)


def test_write_ragged_grid_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        write_png([[1, 0], [1]], tmp_path / "x.png")


def test_write_empty_grid_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        write_png([], tmp_path / "x.png")