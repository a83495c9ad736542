"""A square-grid Minesweeper game with sprite rendering, a pygame window and an XPM reader."""

__version__ = "0.1.0"