"""Minesweeper board state: mine layout, covered cells, flags and outcome."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterator, Optional

MIN_SIZE = 9
MAX_SIZE = 16

HIDDEN = "X"
FLAG = "F"
OPEN = " "

MINE = "M"
EMPTY = " "


class Outcome(Enum):
    """State of a game on a board."""

    PLAYING = "playing"
    LOST = "lost"
    WON = "won"


def mine_count_for(size: int) -> int:
    """Number of mines laid on a square board of ``size`` cells a side."""
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise ValueError(
            f"board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size!r}"
        )
    return 40 - (16 - size) * 30 // 7


class Board:
    """A square board.

    ``cover`` holds what the player sees of each cell (hidden, flagged or
    open) and ``layout`` what lies under it (a mine, nothing, or the digit
    counting the neighbouring mines). Mines are laid on the first reveal,
    never on or next to the revealed cell.
    """

    def __init__(self, size: int, rng: Optional[random.Random] = None) -> None:
        self.size = size
        self.mines = mine_count_for(size)
        self.rng = rng if rng is not None else random.Random()
        self.cover: list[list[str]] = []
        self.layout: list[list[str]] = []
        self.placed = False
        self.revealed = 0
        self.outcome = Outcome.PLAYING
        self.reset()

    @property
    def finished(self) -> bool:
        """True once the game is won or lost."""
        return self.outcome is not Outcome.PLAYING

    def reset(self) -> None:
        """Cover every cell and forget the mines, ready for a new game."""
        self.cover = [[HIDDEN] * self.size for _ in range(self.size)]
        self.layout = [[EMPTY] * self.size for _ in range(self.size)]
        self.placed = False
        self.revealed = 0
        self.outcome = Outcome.PLAYING

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.size}x{self.size} board")

    def _neighbours(self, row: int, col: int) -> Iterator[tuple[int, int]]:
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                r, c = row + dr, col + dc
                if 0 <= r < self.size and 0 <= c < self.size:
                    yield r, c

    def neighbour_mines(self, row: int, col: int) -> int:
        """Count the mines in the up to eight cells around a cell."""
        self._check(row, col)
        return sum(self.layout[r][c] == MINE for r, c in self._neighbours(row, col))

    def place_mines(self, row: int, col: int) -> None:
        """Lay the mines away from the given cell and number the rest."""
        self._check(row, col)
        candidates = [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if max(abs(r - row), abs(c - col)) > 1
        ]
        self.mines = mine_count_for(self.size)
        self.layout = [[EMPTY] * self.size for _ in range(self.size)]
        for r, c in self.rng.sample(candidates, self.mines):
            self.layout[r][c] = MINE
        for r in range(self.size):
            for c in range(self.size):
                if self.layout[r][c] == EMPTY:
                    count = self.neighbour_mines(r, c)
                    if count:
                        self.layout[r][c] = str(count)
        self.placed = True

    def _flood(self, row: int, col: int) -> int:
        """Open hidden cells around an empty cell, spreading over empty ones."""
        opened = 0
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            for nr, nc in self._neighbours(r, c):
                if self.cover[nr][nc] == HIDDEN:
                    self.cover[nr][nc] = OPEN
                    opened += 1
                    if self.layout[nr][nc] == EMPTY:
                        stack.append((nr, nc))
        return opened

    def reveal(self, row: int, col: int) -> Outcome:
        """Open a hidden cell and return the state of the game afterwards.

        Flagged and already open cells are left alone, and nothing changes
        once the game is over.
        """
        self._check(row, col)
        if self.finished:
            return self.outcome
        if not self.placed:
            self.place_mines(row, col)
        if self.cover[row][col] != HIDDEN:
            return self.outcome
        self.cover[row][col] = OPEN
        cell = self.layout[row][col]
        if cell == MINE:
            self.revealed += 1
            self.show_mines()
            self.outcome = Outcome.LOST
            return self.outcome
        if cell == EMPTY:
            self.revealed += self._flood(row, col)
        self.revealed += 1
        if self.revealed >= self.size * self.size - self.mines:
            self.outcome = Outcome.WON
        return self.outcome

    def toggle_flag(self, row: int, col: int) -> None:
        """Put a flag on a hidden cell or take it off again."""
        self._check(row, col)
        if self.finished:
            return
        if self.cover[row][col] == FLAG:
            self.cover[row][col] = HIDDEN
        elif self.cover[row][col] == HIDDEN:
            self.cover[row][col] = FLAG

    def show_mines(self) -> None:
        """Open every cell holding a mine, flagged or not."""
        for r, row in enumerate(self.layout):
            for c, cell in enumerate(row):
                if cell == MINE:
                    self.cover[r][c] = OPEN

    def render_text(self) -> str:
        """The board as the player sees it, one text line per row."""
        lines = (
            "".join(
                self.layout[r][c] if self.cover[r][c] == OPEN else self.cover[r][c]
                for c in range(self.size)
            )
            for r in range(self.size)
        )
        return "".join(f"{line}\n" for line in lines)