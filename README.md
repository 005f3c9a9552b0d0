# blockfall

The rules and state of a falling-block puzzle game. This package has no
drawing, window or input code. You add your own renderer and game loop.

## Modules

- `blockfall.shapes`: `Rotation` (`UP`, `RIGHT`, `DOWN`, `LEFT`, with
  `clockwise()`, `counter_clockwise()` and `opposite()`). It also has
  `cell_filled(shape, dimension, rotation, x, y)` and
  `rotated_cells(shape, dimension, rotation)`, which read a square shape,
  stored as a flat list of booleans, under a rotation. A shape whose length
  is not `dimension * dimension` raises `ValueError`. A cell outside the
  shape raises `IndexError`.
- `blockfall.tetromino`: `Tetromino`, a piece on a board you supply. The
  board needs `width`, `height`, `level`, `cell_exists(pos)`,
  `set_cell(pos, color, alternate_color, alternate_color2)` and
  `add_points(points)`. The piece has these methods:
  - `move_left()`, `move_right()`, `rotate_clockwise()` and
    `rotate_counter_clockwise()` return whether the piece moved. A rotation
    first tries the spot where the piece is. It then tries the offsets in
    `kicks[(from_rotation, to_rotation)]` in order.
  - `rotate_full()` and `fall()` do no fit check.
  - `is_bottom()` reports a landed piece. `is_bottom_but_top()` reports a
    piece that touches the top row.
  - `hard_drop()` drops the piece and adds `int((2 + level) * 1.5)` points
    to the board for each row. It returns the number of rows dropped.
  - `place()` writes the cells into the board. It returns `True` when a
    cell lies above the board, which means the game should end.
  - `align_to(other)` copies another piece and drops it to rest, for use as
    a ghost piece.
  - `cells()` yields the board positions the piece covers.
- `blockfall.scoring`: `ScoreManager` with these methods:
  - `increase_score(lines, last_action, last_piece, alias, level)` scores a
    clear of 1 to 6 lines, scaled by `level + 1`. A spin
    (`last_action == 1`) scores more. A spin that repeats the previous
    clear's action and piece scores 1.5 times as much (back to back). The
    method returns a list of announcement strings such as
    `"Double T spin"`.
  - `add_points` and `increase_lines` add to the score and to the line
    count.
  - `reset_score` and `set_high_score` reset the score and set the high
    score.
  - `save_best_score(name)` writes the score and the line count to
    `<name>.HS` when the saved score is missing or lower. It returns
    whether it wrote the file.
- `blockfall.sound`: `SoundManager`, `SoundName` and `resolve_sound`.
  - The music and effect volumes are read from a settings file
    (`Sound.setting` by default). The file holds the music volume on line 1
    and the effect volume on line 2. Each defaults to 0.2.
  - `set_music_volume` and `set_sfx_volume` save both volumes to the file.
  - Playback goes to a `player` object that follows the `AudioPlayer`
    protocol. Without one, an in-memory player is used.
  - `play_sound("placeSound")` and `play_sound("menuSound")` play the two
    effects. Any other name raises `ValueError`.
  - `play_random_music(rng)` starts a random track and returns its number.
  - `check_music_playing()`, `update_current_music()` and `close()` are
    also available.
- `blockfall.keybinds`: `Action`, `KeyBindings` and `key_name`.
  - `Action` has nine actions. Each has a `label`.
  - `KeyBindings(primary, alternate)` holds nine key codes per row. It has
    `get(action, alternate)`, `assign(action, key, alternate)` and
    `rows()`. Assigning the key that is already bound unbinds it (code 0).
  - `save(path)` writes all 18 codes one per line. `load(path)` reads them
    back. A missing file or blank lines leave the bindings as they are.
  - `key_name(code)` returns a readable name such as `"ARROW LEFT"`, or
    `"INVALID KEY"`.
- `blockfall.capture`: `BindingCapture`.
  - `start(action, alternate)` chooses the slot that waits for a key.
  - `press(key)` binds the key to that slot and returns the bound code.
  - `cancel()` stops waiting.
  - `consume_just_found()` reports once that a key was just captured.
- `blockfall.options_menu`: the options-screen widgets.
  - `HoverButton(min_size, max_size, on_hover)` grows by 5 each frame while
    hovered and shrinks otherwise. Its `update(mouse_over, clicked)` returns
    whether the button was clicked.
  - `VolumeSlider(slider_y, slider_height, on_hover, on_change)` is dragged
    with the mouse. Its `update(mouse_over, mouse_y, pressed, down, released)`
    returns the volume it set this frame, if any.
  - `slider_volume(mouse_y, slider_y, slider_height)` maps a mouse height to
    a volume between 0 and 1.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Rebinding a control:

```python
from blockfall.keybinds import Action, KeyBindings, key_name
from blockfall.capture import BindingCapture

bindings = KeyBindings([262, 263, 88, 90, 82, 256, 32, 264, 67],
                       [68, 65, 87, 81, 0, 0, 0, 83, 0])
capture = BindingCapture(bindings)
capture.start(Action.HARD_DROP, False)
capture.press(257)
print(key_name(bindings.get(Action.HARD_DROP, False)))  # ENTER
bindings.save("Controls.setting")
```

Dropping a piece onto a board:

```python
from blockfall.tetromino import Tetromino

class Board:
    def __init__(self, width=10, height=20):
        self.width, self.height, self.level = width, height, 0
        self.filled = {}
        self.points = 0

    def cell_exists(self, pos):
        return pos in self.filled

    def set_cell(self, pos, color, alternate_color, alternate_color2):
        self.filled[pos] = color

    def add_points(self, points):
        self.points += points

board = Board()
piece = Tetromino(board)
piece.dimension = 2
piece.shape = [True, True, True, True]
piece.pos = (4, 0)
print(piece.hard_drop())   # 18
print(board.points)        # 54
print(piece.place())       # False
print(sorted(board.filled))  # [(4, 18), (4, 19), (5, 18), (5, 19)]
```

Scoring spins:

```python
from blockfall.scoring import ScoreManager

scores = ScoreManager()
print(scores.increase_score(2, 1, 5, "T", 0))  # ['Double T spin']
print(scores.increase_score(2, 1, 5, "T", 0))  # ['B2B T spin']
print(scores.score)                            # 3000
```

## What this package does not do

- There is no board or playfield class, line clearing, piece generator or
  game loop. `Tetromino` works on a board object that you supply.
- Nothing is drawn and no audio device is opened. `SoundManager` only
  forwards playback calls to the player you give it.
- There is no command to start a game.
- `increase_score` takes `found_extra_lines` but never awards an all-clear
  bonus.