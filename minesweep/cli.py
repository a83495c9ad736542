"""Command line entry point: pick a board size, then play in a window."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence, TextIO

from .board import MAX_SIZE, MIN_SIZE
from .game import Game
from .pixels import pack_pixel

DEFAULT_SIZE = 9
WINDOW_TITLE = "MineSweeper"

INTRO = (
    "Introduce a number (9-16) to choose grid size. "
    "Press enter to continue with default size (9x9):"
)
RETRY = "Please, choose a valid number (9-16):"

_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _valid(size: int) -> bool:
    return MIN_SIZE <= size <= MAX_SIZE


def parse_grid_size(text: str) -> int:
    """Read a size from one input line; a bare line break means the default size.

    Leading whitespace is skipped and reading stops at the first non-digit;
    text without a number gives 0.
    """
    if text.rstrip("\n") == "":
        return DEFAULT_SIZE
    return _atoi(text)


def _read_size(stdin: TextIO) -> int:
    line = stdin.readline()
    if not line:
        raise EOFError("input ended before a valid grid size was given")
    return parse_grid_size(line)


def choose_grid_size(arg: Optional[str], stdin: TextIO, stdout: TextIO) -> int:
    """Settle the board size from an argument or from lines read on ``stdin``.

    Without an argument the user is asked first. Sizes outside 9-16 are asked
    for again. Raises EOFError when input runs out, and ValueError when a
    negative number is typed after a bad argument.
    """
    if arg is None:
        print(INTRO, file=stdout)
        while True:
            size = _read_size(stdin)
            if _valid(size):
                return size
            print(RETRY, file=stdout)

    size = _atoi(arg)
    while not _valid(size):
        print(RETRY, file=stdout)
        size = _read_size(stdin)
        if size < 0:
            raise ValueError(f"grid size must not be negative, got {size}")
    return size


def _surface_from(game: Game, pygame):
    frame = game.frame()
    height = len(frame)
    width = len(frame[0]) if height else 0
    data = b"".join(pack_pixel(pixel, 3, True) for row in frame for pixel in row)
    return pygame.image.frombuffer(data, (width, height), "RGB")


def run_window(game: Game) -> None:
    """Show the game in a window and play it until the window is closed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((game.pixels, game.pixels))
        pygame.display.set_caption(WINDOW_TITLE)
        dirty = True
        while True:
            if dirty:
                screen.blit(_surface_from(game, pygame), (0, 0))
                pygame.display.flip()
                dirty = False
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                game.handle_mouse(event.button, x, y)
                dirty = True
            elif event.type == pygame.KEYUP:
                game.handle_key(event.key)
                dirty = True
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for a board size and open the game window; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    arg = args[0] if args else None
    try:
        size = choose_grid_size(arg, sys.stdin, sys.stdout)
    except (EOFError, ValueError):
        return 1
    game = Game(size, out=sys.stdout)
    run_window(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())