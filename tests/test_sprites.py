import random

import pytest

from minesweep.board import FLAG, MINE, OPEN, Board
from minesweep.sprites import (
    BLUE,
    GREY,
    GREY2,
    RED,
    SPRITE_SIZE,
    SPRITES,
    WHITE,
    color_of,
    render_board,
    sprite_for,
)


def _board_with_layout():
    board = Board(9, rng=random.Random(1))
    board.layout[0][0] = MINE
    board.layout[0][1] = "1"
    board.layout[5][5] = MINE
    board.placed = True
    return board


def test_color_of_known_letters():
    assert color_of("G") == GREY
    assert color_of("g") == GREY2
    assert color_of("B") == BLUE


def test_color_of_unknown_letter_is_white():
    assert color_of("W") == WHITE
    assert color_of("?") == WHITE


def test_exploded_turns_only_grey_red():
    assert color_of("G", True) == RED
    assert color_of("g", True) == GREY2
    assert color_of("B", True) == BLUE


def test_all_sprites_are_square():
    for rows in SPRITES.values():
        assert len(rows) == SPRITE_SIZE
        assert all(len(line) == SPRITE_SIZE for line in rows)


def test_hidden_cell_sprite():
    board = _board_with_layout()
    grid = sprite_for(board, 3, 3)
    assert grid[0] == (GREY,) * SPRITE_SIZE
    assert grid[5][5] == WHITE


def test_flag_sprite_has_red():
    board = _board_with_layout()
    board.cover[2][2] = FLAG
    grid = sprite_for(board, 2, 2)
    assert grid[3][6] == RED


def test_digit_sprite_uses_number_colour():
    board = _board_with_layout()
    board.cover[0][1] = OPEN
    grid = sprite_for(board, 0, 1)
    assert grid[2][7] == BLUE


def test_clicked_mine_is_exploded():
    board = _board_with_layout()
    board.show_mines()
    exploded = sprite_for(board, 0, 0, (0, 0))
    calm = sprite_for(board, 5, 5, (0, 0))
    assert exploded[1][1] == RED
    assert calm[1][1] == GREY


def test_render_size():
    board = _board_with_layout()
    image = render_board(board, None, 5)
    assert len(image) == 9 * 5
    assert all(len(line) == 9 * 5 for line in image)


def test_render_at_sprite_size_matches_sprites():
    board = _board_with_layout()
    board.cover[0][1] = OPEN
    image = render_board(board, None, SPRITE_SIZE)
    expected = sprite_for(board, 0, 1)
    for y in range(SPRITE_SIZE):
        assert image[y][SPRITE_SIZE:2 * SPRITE_SIZE] == expected[y]


def test_render_rejects_bad_cell_size():
    with pytest.raises(ValueError):
        render_board(_board_with_layout(), None, 0)