[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minesweep"
version = "0.1.0"
description = "A square-grid Minesweeper game with pixel-art sprites, played in a pygame window, plus an XPM image reader"
requires-python = ">=3.10"
keywords = ["minesweeper", "game", "puzzle", "pygame", "xpm", "sprites"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minesweep = "minesweep.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minesweep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
