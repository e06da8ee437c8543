# tetrisgame

A falling-block puzzle game played in a pygame window. Seven piece kinds
(I, J, L, O, S, T, Z) fall one at a time. Each piece has a random colour and
starts in a random column. When you fill a whole row, it clears. Cleared rows
blink briefly and then disappear, and everything above them drops down.

## Installing

```
pip install .
```

The game needs a block palette image. This is a single horizontal strip that
holds twelve equally wide block tiles. By default the game reads it from
`assets/yukulel_minos.png`, relative to the working directory. If the file is
not there, the game stops with `FileNotFoundError`.

## Playing

```
tetrisgame
tetrisgame --palette path/to/palette.png
```

| Key        | Action                                  |
|------------|-----------------------------------------|
| Left/Right | Move the piece one column               |
| Down       | Move the piece one row (soft drop)      |
| Space      | Drop the piece to where it lands        |
| Tab        | Rotate the piece a quarter turn         |

A piece also falls one row every second by itself. While rows are being
cleared, key presses are ignored. Close the window to quit.

## Using the pieces in code

The game rules in `tetrisgame.board` are kept apart from the window, so you
can use and test them without a display:

```python
import random

from tetrisgame.board import Board
from tetrisgame.kinds import TetrisType
from tetrisgame.pieces import TetrisPiece

board = Board(random.Random(1))
board.hard_drop()
print(board.find_full_lines())

piece = TetrisPiece(62, 0, TetrisType.T)
piece.update_position()
print(piece.bottom_surface_blocks())
```

- `Board` provides `move_sideways`, `soft_drop`, `hard_drop`, `rotate` and
  `finish_clearing`, plus collision checks such as `is_valid_position` and
  `check_side_collision`.
- `tetrisgame.shapes.layout_blocks` gives the four block positions of any
  piece kind and spin state.
- `tetrisgame.textures.load_textures` cuts a palette image into block tiles.
- `tetrisgame.app.GameApp` drives a board from key presses and draws it on a
  pygame surface.

## What it does not do

The game keeps no score, shows no preview of the next piece, and has no
game-over screen. Play simply continues until you close the window.

## Running the tests

```
pip install ".[test]"
pytest
```