"""Cell sprites and rendering of a board into rows of 0xRRGGBB pixels."""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional

from .board import EMPTY, FLAG, HIDDEN, MINE, Board

CELL_SIZE = 50
"""Edge of one cell on screen, in pixels."""

SPRITE_SIZE = 14
"""Edge of one sprite, in sprite pixels."""

GREY = 0x898989
GREY2 = 0x747474
WHITE = 0xBDBDBD
BLACK = 0x2C2C2C
BLUE = 0x1C73FF
CYAN = 0x16FFE0
GREEN = 0x45D900
YELL = 0xFFDD00
ORAN = 0xFF7B00
RED = 0xFF2A00
MAG = 0xFF1783
PURP = 0xB12BFF
VIOL = 0x4D3DFF

_PALETTE: Mapping[str, int] = MappingProxyType({
    "G": GREY,
    "g": GREY2,
    "B": BLUE,
    "C": CYAN,
    "H": GREEN,
    "Y": YELL,
    "O": ORAN,
    "R": RED,
    "M": MAG,
    "P": PURP,
    "V": VIOL,
    "L": BLACK,
})

_FRAME_TOP = ("gggggggggggggg", "gGGGGGGGGGGGGg")
_FRAME_BOTTOM = ("gGGGGGGGGGGGGg", "gggggggggggggg")

SPRITES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "cell": (
        "GGGGGGGGGGGGGG", "GGGGGGGGGGGGGg",
        *("GGWWWWWWWWWWgg",) * 10,
        "Gggggggggggggg", "gggggggggggggg",
    ),
    "0": (*_FRAME_TOP, *("gGGGGGGGGGGGGg",) * 10, *_FRAME_BOTTOM),
    "1": (
        *_FRAME_TOP,
        "gGGGGGGBGGGGGg", "gGGGGGBBGGGGGg", "gGGGGBBBGGGGGg", "gGGGBBBBGGGGGg",
        "gGGGGGBBGGGGGg", "gGGGGGBBGGGGGg", "gGGGGGBBGGGGGg", "gGGGGGBBGGGGGg",
        "gGGGGGBBGGGGGg", "gGGGBBBBBBGGGg",
        *_FRAME_BOTTOM,
    ),
    "2": (
        *_FRAME_TOP,
        "gGGGGCCCCGGGGg", "gGGGCCCCCCGGGg", "gGGGCCGGCCGGGg", "gGGGCGGGCCGGGg",
        "gGGGGGGCCCGGGg", "gGGGGGCCCGGGGg", "gGGGGCCCGGGGGg", "gGGGCCCGGGGGGg",
        "gGGGCCGGGGGGGg", "gGGGCCCCCCGGGg",
        *_FRAME_BOTTOM,
    ),
    "3": (
        *_FRAME_TOP,
        "gGGGGHHHHGGGGg", "gGGGHHGGHHGGGg", "gGGGHGGGGHGGGg", "gGGGGGGGHHGGGg",
        "gGGGGGHHHGGGGg", "gGGGGGGGHHGGGg", "gGGGGGGGGHGGGg", "gGGGHGGGGHGGGg",
        "gGGGHHGGHHGGGg", "gGGGGHHHHGGGGg",
        *_FRAME_BOTTOM,
    ),
    "4": (
        *_FRAME_TOP,
        "gGGGGGGGYYGGGg", "gGGGGGGYYYGGGg", "gGGGGGYYYYGGGg", "gGGGGYYGYYGGGg",
        "gGGGYYGGYYGGGg", "gGGYYGGGYYGGGg", "gGGYYYYYYYYGGg", "gGGGGGGGYYGGGg",
        "gGGGGGGGYYGGGg", "gGGGGGGGYYGGGg",
        *_FRAME_BOTTOM,
    ),
    "5": (
        *_FRAME_TOP,
        "gGGGOOOOOOGGGg", "gGGGOOOOOOGGGg", "gGGGOGGGGGGGGg", "gGGGOGGGGGGGGg",
        "gGGGOOOOOGGGGg", "gGGGGGGGOOGGGg", "gGGGGGGGGOGGGg", "gGGGOGGGGOGGGg",
        "gGGGOOGGOOGGGg", "gGGGGOOOOGGGGg",
        *_FRAME_BOTTOM,
    ),
    "6": (
        *_FRAME_TOP,
        "gGGGGRRRRGGGGg", "gGGGRRGGRRGGGg", "gGGGRGGGGRGGGg", "gGGGRGGGGGGGGg",
        "gGGGRRRRRGGGGg", "gGGGRRGGRRGGGg", "gGGGRGGGGRGGGg", "gGGGRGGGGRGGGg",
        "gGGGRRGGRRGGGg", "gGGGGRRRRGGGGg",
        *_FRAME_BOTTOM,
    ),
    "7": (
        *_FRAME_TOP,
        "gGGGMMMMMMGGGg", "gGGGMMMMMMGGGg", "gGGGGGGGGMGGGg", "gGGGGGGGMMGGGg",
        "gGGGGGGGMGGGGg", "gGGGGGGMMGGGGg", "gGGGGGGMGGGGGg", "gGGGGGMMGGGGGg",
        "gGGGGGMGGGGGGg", "gGGGGGMGGGGGGg",
        *_FRAME_BOTTOM,
    ),
    "8": (
        *_FRAME_TOP,
        "gGGGGPPPPGGGGg", "gGGGPPGGPPGGGg", "gGGGPGGGGPGGGg", "gGGGPPGGPPGGGg",
        "gGGGGPPPPGGGGg", "gGGGPPGGPPGGGg", "gGGGPGGGGPGGGg", "gGGGPGGGGPGGGg",
        "gGGGPPGGPPGGGg", "gGGGGPPPPGGGGg",
        *_FRAME_BOTTOM,
    ),
    "9": (
        *_FRAME_TOP,
        "gGGGGVVVVGGGGg", "gGGGVVGGVVGGGg", "gGGGVGGGGVGGGg", "gGGGVGGGGVGGGg",
        "gGGGVVGGVVGGGg", "gGGGGVVVVVGGGg", "gGGGGGGGGVGGGg", "gGGGVGGGGVGGGg",
        "gGGGVVGGVVGGGg", "gGGGGVVVVGGGGg",
        *_FRAME_BOTTOM,
    ),
    "mine": (
        *_FRAME_TOP,
        "gGGGGGLLGGGGGg", "gGGLGLLLLGLGGg", "gGGGLLWWLLGGGg", "gGGLLLLWWLLGGg",
        "gGLLLLLLWWLLGg", "gGLLLLLLLWLLGg", "gGGLLLLLLLLGGg", "gGGGLLLLLLGGGg",
        "gGGLGLLLLGLGGg", "gGGGGGLLGGGGGg",
        *_FRAME_BOTTOM,
    ),
    "flag": (
        "GGGGGGGGGGGGGG", "GGGGGGGGGGGGGg",
        "GGWWWWWWWWWWgg", "GGWWWWRRWWWWgg", "GGWWWWRRRWWWgg", "GGWWWWRRRRWWgg",
        "GGWWWWRRRWWWgg", "GGWWWWRRWWWWgg", "GGWWWWLWWWWWgg", "GGWWWLLLWWWWgg",
        "GGWWLLLLLWWWgg", "GGWWWWWWWWWWgg",
        "Gggggggggggggg", "gggggggggggggg",
    ),
})
"""Sprite pictures, one letter per pixel, rows top to bottom."""

ColorGrid = tuple[tuple[int, ...], ...]


def color_of(symbol: str, exploded: bool = False) -> int:
    """Colour of one sprite letter; an exploded mine turns its grey to red.

    Letters without a colour of their own are drawn in the light fill colour.
    """
    if exploded and symbol == "G":
        return RED
    return _PALETTE.get(symbol, WHITE)


@lru_cache(maxsize=None)
def _grid(name: str, exploded: bool) -> ColorGrid:
    return tuple(
        tuple(color_of(symbol, exploded) for symbol in line) for line in SPRITES[name]
    )


def sprite_for(
    board: Board, row: int, col: int, clicked: Optional[tuple[int, int]] = None
) -> ColorGrid:
    """The colour grid of the sprite showing a cell.

    ``clicked`` is the cell last clicked; a mine there is drawn exploded.
    """
    cover = board.cover[row][col]
    if cover == HIDDEN:
        return _grid("cell", False)
    if cover == FLAG:
        return _grid("flag", False)
    cell = board.layout[row][col]
    if cell == EMPTY:
        return _grid("0", False)
    if cell == MINE:
        return _grid("mine", clicked == (row, col))
    if cell in SPRITES and cell.isdigit():
        return _grid(cell, False)
    raise ValueError(f"no sprite for cell content {cell!r}")


def render_board(
    board: Board,
    clicked: Optional[tuple[int, int]] = None,
    cell_size: int = CELL_SIZE,
) -> ColorGrid:
    """Draw the whole board: rows of 0xRRGGBB pixels, top row first."""
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size!r}")
    scale = [pixel * SPRITE_SIZE // cell_size for pixel in range(cell_size)]
    image = []
    for row in range(board.size):
        grids = [sprite_for(board, row, col, clicked) for col in range(board.size)]
        for sprite_row in scale:
            line: list[int] = []
            for grid in grids:
                source = grid[sprite_row]
                line.extend(source[sx] for sx in scale)
            image.append(tuple(line))
    return tuple(image)