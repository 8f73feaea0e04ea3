# blockfall

This package holds the game logic of a falling-block puzzle game. It has no
display and no input devices. You pass it the buttons that are held, once per
frame. It keeps the board state up to date. It also works out where each sprite
goes and what the background scroll values should be.

## Modules

- `blockfall.constants`
  - Board dimensions.
  - `Tile`: the contents of a board cell, which is `EMPTY` or one of eight colours.
  - `Tetromino`: the seven pieces.
  - `tile_entry(tile, palette, priority, fliph, flipv)`: packs a 16-bit tilemap entry.
  - `background_index(x, y)`: gives the position of a cell in a 32×32 tilemap.
- `blockfall.math_tables`
  - `sine(degrees)` and `cosine(degrees)`: take a whole number of degrees, reduced modulo 360.
  - Each returns a byte-scaled value from 0 to 255, centred on 128.
- `blockfall.board.Board(outline_table, tilemap)`
  - Holds the 10×22 playfield and mirrors it into a 32×32 background tilemap.
  - `outline_table` must have 256 entries and `tilemap` must have 1024.
  - `is_solid(x, y)`: true for any cell outside the board and for any filled cell.
  - `get_tile(x, y)`: reads a cell. Any cell outside the board reads as empty.
  - `set_tile(x, y, tile)`: writes a cell and its tilemap entry. It raises `IndexError` outside the board.
  - `outline_for_tile(x, y)` and `outline_tile(x, y)`: draw outline tiles on empty cells, chosen by which of the eight neighbours are filled.
- `blockfall.piece_bag.PieceBag(next_queue_length, bag_length, rng=None)`
  - The piece randomiser.
  - `draw()` takes pieces at random from a bag of `bag_length` pieces and passes them through a preview queue of `next_queue_length` pieces.
  - A bag length of 0 picks any of the seven pieces each time.
  - `queue` and `pieces_left` show the current state.
- `blockfall.player`
  - `PieceTables`: an immutable set of lookup tables.
    - `tetromino_x` / `tetromino_y`: 7 pieces × 4 rotations × 4 minos.
    - Per-rotation kick offsets: `jlstz_offset_*`, `i_offset_*` and `o_offset_*`. Each has 4 rows of at least 5 offsets.
    - `outline`: 256 outline tiles.
  - `Player(tables, board, bag)`: the active piece. Its methods:
    - `check_collision` and `attempt_move`. `attempt_move` returns `True` when the piece is blocked.
    - `kick_piece` and `attempt_rotate`, which try up to five kick offsets.
    - `relocate_ghost_piece`, which finds the drop distance.
    - `lock_piece`, which writes the piece into the board and spawns the next one.
    - `next_piece`.
- `blockfall.game`
  - `Button`: the controller buttons as bit flags.
  - `Game(tables, tilemap, rng=None)`: a one-player session.
    - At the start it places a few tiles on the board and draws pieces until the first one is an I piece.
    - The session uses a preview queue of 5 and a 7-piece bag.

## Usage

```python
import random

from blockfall.game import Button, Game
from blockfall.player import PieceTables

tables = PieceTables(
    tetromino_x=..., tetromino_y=...,
    jlstz_offset_x=..., jlstz_offset_y=...,
    i_offset_x=..., i_offset_y=...,
    o_offset_x=..., o_offset_y=...,
    outline=...,
)
tilemap = [0] * 1024             # initial 32x32 background tilemap
game = Game(tables, tilemap, random.Random(1))

game.update(Button.LEFT)         # one frame with LEFT held
game.update(Button(0))           # all buttons released
for x, y in game.sprite_positions():
    ...
scroll_x, scroll_y = game.scroll()
```

`sprite_positions()` returns nine screen positions:

- sprites 0–3 are the active piece's minos;
- sprites 4–7 are the ghost piece's minos;
- sprite 8 is the piece position marker.

`scroll()` returns the two 16-bit background scroll values.

Moving into a wall makes the board shake sideways. The shake shows up in both
the sprite positions and the scroll values.

A button acts only on the frame where it goes from released to pressed. Holding
it down does not repeat the action.

| Button | Action |
| --- | --- |
| LEFT / RIGHT | move one column |
| UP / DOWN | move one row |
| A | rotate one step forward |
| B | rotate one step back |
| START | lock the piece where it is |
| L | drop the piece by the ghost distance and lock it |
| SELECT | replace the piece with the next one from the bag |

## What it does not do

This package is logic only. It does not do any of the following:

- draw anything or play sound;
- clear full lines, apply gravity, hold pieces or detect game over;
- keep scores;
- provide piece shape, kick or outline data. You supply these through `PieceTables`;
- provide a command to run.

## Running the tests

```
pip install -e .[test]
pytest
```