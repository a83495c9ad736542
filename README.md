# minesweep

A Minesweeper game on a square board of 9×9 up to 16×16 cells. The board is
drawn in a pygame window with 14×14 pixel-art sprites, each scaled up to a
50×50 pixel cell.

## Installing

```
pip install .
```

To run the tests, install the extra as well:

```
pip install .[test]
pytest
```

## Playing

```
minesweep
```

The game first asks for a grid size between 9 and 16. Press Enter without
typing anything to get the default 9×9 board. You can also give the size on
the command line:

```
minesweep 12
```

If the number is out of range, the game asks again until you give a valid one.
When input ends before a valid size is given, or you type a negative number
after a bad command-line size, the command exits with status 1.

Controls:

- Left click: uncover a cell
- Right click: put a flag on a covered cell, or take it off again
- `R`: start a new game (this also works after a game is over)

The first cell you uncover never holds a mine, and neither do the cells next
to it. Uncovering an empty cell also uncovers the cells around it, and this
spreads over further empty cells. The number of mines grows with the board
size: 10 mines on a 9×9 board and 40 on a 16×16 board. If you uncover a mine,
every mine is shown and the mine you clicked is drawn in red. You win once
every cell without a mine has been uncovered. "YOU LOSE!" or "YOU WIN!" is
printed on the terminal, and clicks are ignored until you press `R`. Closing
the window ends the game.

## Using it as a library

The game logic does not need a window:

- `minesweep.board.Board(size, rng=None)` holds the board. It has `reset`,
  `place_mines`, `neighbour_mines`, `reveal`, `toggle_flag`, `show_mines`
  and `render_text`. `reveal` returns an `Outcome` (`PLAYING`, `LOST` or
  `WON`). Mines are placed on the first `reveal`.
- `minesweep.board.mine_count_for(size)` gives the number of mines for a
  board size. It raises `ValueError` for sizes outside 9–16.
- `minesweep.sprites.render_board(board, clicked=None, cell_size=50)` draws
  a board as rows of 0xRRGGBB colours. `color_of` and `sprite_for` show how
  each cell is drawn.
- `minesweep.game.Game(size, rng=None, out=None, cell_size=50)` turns mouse
  clicks at pixel positions (`handle_mouse`) and key codes (`handle_key`)
  into moves. `frame` returns the current picture.
- `minesweep.cli.choose_grid_size(arg, stdin, stdout)` and
  `parse_grid_size(text)` do the size prompt without the window.
  `run_window(game)` opens the pygame window for a `Game`.

The package also reads XPM images:

- `minesweep.xpm.load_xpm(path)`, `parse_xpm_text(text)` and
  `parse_xpm_lines(lines)` return an `XpmImage` with `width`, `height` and
  rows of 0xRRGGBB `pixels`. They raise `XpmError` when the data is broken.
  Colours named `None` become `0xFF000000`. `XpmImage.to_bytes` packs the
  pixels into raw bytes.
- `minesweep.colornames.color_by_name` looks up X11 colour names, ignoring
  case.
- `minesweep.pixels.PixelFormat.from_masks(...).convert(color)` maps a
  colour to a pixel value for a given channel layout. `pack_pixel` turns a
  pixel value into bytes in either byte order.

## What it does not do

The game does not save scores or games, keeps no timer, and shows no mine
counter in the window. Messages go to the terminal. The board is always
square.