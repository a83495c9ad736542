import random

import pytest

from minesweep.board import (
    EMPTY,
    FLAG,
    HIDDEN,
    MINE,
    OPEN,
    Board,
    Outcome,
    mine_count_for,
)


def make_board(size=9, seed=1):
    return Board(size, rng=random.Random(seed))


def crafted(size, mines):
    """A board with mines at the given cells and numbers filled in."""
    board = make_board(size)
    board.layout = [[EMPTY] * size for _ in range(size)]
    for r, c in mines:
        board.layout[r][c] = MINE
    for r in range(size):
        for c in range(size):
            if board.layout[r][c] == EMPTY:
                n = board.neighbour_mines(r, c)
                if n:
                    board.layout[r][c] = str(n)
    board.mines = len(mines)
    board.placed = True
    return board


def mine_cells(board):
    return {
        (r, c)
        for r in range(board.size)
        for c in range(board.size)
        if board.layout[r][c] == MINE
    }


def test_mine_count_limits():
    assert mine_count_for(16) == 40
    assert mine_count_for(9) == 10


def test_mine_count_grows_with_size():
    counts = [mine_count_for(n) for n in range(9, 17)]
    assert counts == sorted(counts)


@pytest.mark.parametrize("size", [8, 17, 0, -3])
def test_bad_size_rejected(size):
    with pytest.raises(ValueError):
        mine_count_for(size)
    with pytest.raises(ValueError):
        Board(size)


def test_new_board_all_hidden():
    board = make_board()
    assert all(cell == HIDDEN for row in board.cover for cell in row)
    assert board.outcome is Outcome.PLAYING
    assert not board.placed


@pytest.mark.parametrize("size", [9, 12, 16])
@pytest.mark.parametrize("click", [(0, 0), (4, 4), (8, 3)])
def test_place_mines_keeps_clear_of_click(size, click):
    board = make_board(size, seed=size)
    board.place_mines(*click)
    mines = mine_cells(board)
    assert len(mines) == mine_count_for(size)
    for r, c in mines:
        assert max(abs(r - click[0]), abs(c - click[1])) > 1
    assert board.placed


def test_numbers_match_neighbour_mines():
    board = make_board(12, seed=7)
    board.place_mines(5, 5)
    for r in range(12):
        for c in range(12):
            cell = board.layout[r][c]
            if cell == MINE:
                continue
            n = board.neighbour_mines(r, c)
            assert cell == (str(n) if n else EMPTY)


def test_neighbour_mines_corner_and_centre():
    board = crafted(9, [(0, 1), (1, 0), (1, 1), (5, 5)])
    assert board.neighbour_mines(0, 0) == 3
    assert board.neighbour_mines(4, 4) == 1
    assert board.neighbour_mines(8, 8) == 0


def test_first_reveal_places_mines_and_opens_area():
    board = make_board(9, seed=3)
    outcome = board.reveal(4, 4)
    assert board.placed
    assert outcome in (Outcome.PLAYING, Outcome.WON)
    assert board.cover[4][4] == OPEN
    for r in range(3, 6):
        for c in range(3, 6):
            assert board.cover[r][c] == OPEN
    opened = sum(cell == OPEN for row in board.cover for cell in row)
    assert board.revealed == opened


def test_flood_fill_stops_at_numbers():
    board = crafted(9, [(8, 8)])
    board.reveal(0, 0)
    assert board.cover[8][8] == HIDDEN
    assert board.revealed == 80
    assert board.outcome is Outcome.WON


def test_flood_fill_skips_flags():
    board = crafted(9, [(8, 8)])
    board.toggle_flag(0, 5)
    board.reveal(0, 0)
    assert board.cover[0][5] == FLAG
    assert board.outcome is Outcome.PLAYING
    assert board.revealed == 79


def test_reveal_number_opens_one_cell():
    board = crafted(9, [(0, 0)])
    board.reveal(1, 1)
    assert board.revealed == 1
    assert board.cover[1][1] == OPEN
    assert board.cover[2][2] == HIDDEN


def test_reveal_mine_loses_and_shows_mines():
    mines = [(0, 0), (5, 5), (8, 2)]
    board = crafted(9, mines)
    board.toggle_flag(5, 5)
    assert board.reveal(0, 0) is Outcome.LOST
    assert board.finished
    for r, c in mines:
        assert board.cover[r][c] == OPEN


def test_finished_board_ignores_input():
    board = crafted(9, [(0, 0)])
    board.reveal(0, 0)
    before = [row[:] for row in board.cover]
    assert board.reveal(4, 4) is Outcome.LOST
    board.toggle_flag(6, 6)
    assert board.cover == before


def test_win_by_revealing_every_safe_cell():
    board = make_board(9, seed=11)
    board.reveal(0, 0)
    safe = [
        (r, c)
        for r in range(9)
        for c in range(9)
        if board.layout[r][c] != MINE
    ]
    for r, c in safe:
        board.reveal(r, c)
    assert board.outcome is Outcome.WON
    assert all(board.cover[r][c] == OPEN for r, c in safe)
    assert all(board.cover[r][c] == HIDDEN for r, c in mine_cells(board))


def test_flag_toggle_round_trip():
    board = make_board()
    board.toggle_flag(2, 3)
    assert board.cover[2][3] == FLAG
    board.toggle_flag(2, 3)
    assert board.cover[2][3] == HIDDEN


def test_flagged_cell_is_not_revealed():
    board = crafted(9, [(0, 0)])
    board.toggle_flag(4, 4)
    assert board.reveal(4, 4) is Outcome.PLAYING
    assert board.cover[4][4] == FLAG
    assert board.revealed == 0


def test_flag_on_open_cell_does_nothing():
    board = crafted(9, [(0, 0)])
    board.reveal(1, 1)
    board.toggle_flag(1, 1)
    assert board.cover[1][1] == OPEN


def test_reset_restores_fresh_board():
    board = make_board(10, seed=5)
    board.reveal(3, 3)
    board.toggle_flag(9, 9)
    board.reset()
    assert all(cell == HIDDEN for row in board.cover for cell in row)
    assert board.revealed == 0
    assert not board.placed
    assert board.outcome is Outcome.PLAYING


def test_reset_after_loss_allows_play():
    board = crafted(9, [(0, 0)])
    board.reveal(0, 0)
    board.reset()
    board.reveal(4, 4)
    assert board.outcome is not Outcome.LOST
    assert board.cover[4][4] == OPEN


@pytest.mark.parametrize("cell", [(-1, 0), (0, 9), (9, 0), (3, -2)])
def test_out_of_range_cells_rejected(cell):
    board = make_board()
    with pytest.raises(IndexError):
        board.reveal(*cell)
    with pytest.raises(IndexError):
        board.toggle_flag(*cell)
    with pytest.raises(IndexError):
        board.neighbour_mines(*cell)


def test_render_text_fresh_board():
    board = make_board()
    assert board.render_text() == ("X" * 9 + "\n") * 9


def test_render_text_shows_flags_and_open_cells():
    board = crafted(9, [(0, 0)])
    board.toggle_flag(8, 8)
    board.reveal(1, 1)
    lines = board.render_text().splitlines()
    assert len(lines) == 9
    assert lines[1][1] == "1"
    assert lines[8][8] == FLAG
    assert lines[0][0] == HIDDEN
    assert all(len(line) == 9 for line in lines)