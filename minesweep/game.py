"""A game session: turns mouse and key events into moves on a board."""

from __future__ import annotations

import random
import sys
from typing import Optional, TextIO

from .board import Board, Outcome
from .sprites import CELL_SIZE, ColorGrid, render_board

LEFT_BUTTON = 1
RIGHT_BUTTON = 3
RESTART_KEY = 114  # "r"

INSTRUCTIONS = (
    "INSTRUCTIONS:\n\tLeft click: unhide cell\n"
    "\tRight click: put flag\n\t\"R\": restart game"
)
LOSE_MESSAGE = "YOU LOSE!\npress \"R\" to restart."
WIN_MESSAGE = "YOU WIN!"


class Game:
    """One board played through pointer clicks at pixel positions."""

    def __init__(
        self,
        size: int,
        rng: Optional[random.Random] = None,
        out: Optional[TextIO] = None,
        cell_size: int = CELL_SIZE,
    ) -> None:
        self.board = Board(size, rng)
        self.out = out if out is not None else sys.stdout
        self.cell_size = cell_size
        self.clicked: Optional[tuple[int, int]] = None
        print(INSTRUCTIONS, file=self.out)

    @property
    def pixels(self) -> int:
        """Edge of the square window, in pixels."""
        return self.board.size * self.cell_size

    def handle_mouse(self, button: int, x: int, y: int) -> Outcome:
        """Left button opens the cell under the pointer, right button flags it."""
        row, col = y // self.cell_size, x // self.cell_size
        if not (0 <= row < self.board.size and 0 <= col < self.board.size):
            return self.board.outcome
        self.clicked = (row, col)
        if self.board.finished:
            return self.board.outcome
        if button == LEFT_BUTTON:
            outcome = self.board.reveal(row, col)
            if outcome is Outcome.LOST:
                print(LOSE_MESSAGE, file=self.out)
            elif outcome is Outcome.WON:
                print(WIN_MESSAGE, file=self.out)
        elif button == RIGHT_BUTTON:
            self.board.toggle_flag(row, col)
        return self.board.outcome

    def handle_key(self, key: int) -> int:
        """The restart key covers the board for a new game; returns the key."""
        if key == RESTART_KEY:
            self.board.reset()
        return key

    def frame(self) -> ColorGrid:
        """The current picture of the board."""
        return render_board(self.board, self.clicked, self.cell_size)