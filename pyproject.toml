[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifegrid"
version = "0.1.0"
description = "Game of Life on a grid read from PNG or text, written out generation by generation as PNG frames and text dumps"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "game of life",
    "cellular automaton",
    "moore neighbourhood",
    "simulation",
    "png",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lifegrid = "lifegrid.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lifegrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
