# snakeplay

A classic snake arcade game built on pygame. You steer the snake around a
grid and eat food to grow and score points. The game ends when the snake hits
a wall or its own tail. Your best score is kept between sessions, and higher
scores unlock new snake skins.

## Installing

```
pip install .
```

This also installs `pygame`, which the game needs.

## Playing

```
snakeplay
```

By default the game reads and writes its files in the current directory. To
use another directory, pass it with `--data-dir`:

```
snakeplay --data-dir path/to/data
```

The main menu offers:

- **Zacznij gre** starts a game. You then choose a board size:
  - *Small*: 20 × 15 cells
  - *Medium*: 30 × 20 cells
  - *Large*: 40 × 30 cells

  The window is resized to fit the board you choose.
- **Ustawienia** opens the settings. There, **Dzwiek: ON/OFF** turns all sound
  effects and music on or off, and **Powrot** goes back.
- **Skorki** opens the skin selection.
- **Wyjdz** quits.

Steer with the arrow keys. The snake cannot turn straight back on itself, and
it takes at most one turn per move. It moves one cell every 0.1 seconds, and
each piece of food is worth one point. When the snake hits a wall or itself
the game is over. You can then **Restart** on the same board or go back to the
**Menu**. A new best score is saved as soon as the game ends.

## Skins

A skin unlocks once your high score reaches its value:

| Skin      | High score needed |
|-----------|-------------------|
| Classic   | 0                 |
| Golden    | 50                |
| Rainbow   | 100               |
| Legendary | 200               |

In the skins menu, unlocked skins are shown in green and locked ones in red.
Clicking an unlocked skin selects it and saves the choice. Clicking a locked
skin does nothing. If the saved skin is locked at the next start, the game
falls back to Classic.

## Data directory

- `highscore.txt` holds the best score. If it is missing or unreadable, the
  best score starts at 0.
- `skin.txt` holds the chosen skin.
- `textures/grid_cell.png`, `textures/topbar.png`, `textures/button.png` and
  `textures/food.png` are optional images.
- `textures/skins/skin<N>/`, where N is 0 to 3, holds the snake images for each
  skin. These are `snake_head_{up,down,left,right}.png`,
  `snake_body_{horizontal,vertical}.png` and
  `snake_corner_{up_left,up_right,down_left,down_right}.png`.
- `sounds/eat.wav`, `sounds/death.wav` and `sounds/click.wav` are the sound
  effects.
- `sounds/menu_music.ogg` and `sounds/game_music.ogg` are the background
  music. Music plays only when both files are present.
- `arial.ttf` is the font for all text. Without it, pygame's default font is
  used.

Every image and sound is optional. Where an image is missing the game draws a
plain coloured shape, and where a sound is missing it stays silent. For the
snake, each group of images (heads, bodies, corners) is used only if the whole
group is present.

## Using it as a library

The game rules work without a window:

```python
from snakeplay.board import Board, Direction
from snakeplay.skins import is_skin_unlocked, skin_name

board = Board(cols=20, rows=15)
board.turn(Direction.DOWN)    # True if the turn was accepted
ate = board.step()            # True if the snake ate the food
print(board.check_collision())

print(skin_name(2), is_skin_unlocked(2, high_score=120))   # Rainbow True
```

The package is made up of these modules:

- `snakeplay.board` holds `Board`, `Segment`, `Direction` and `Corner`: the
  grid, the snake, food placement, collisions and how the body bends.
- `snakeplay.skins` holds the `Skin` enum and the unlock rules.
- `snakeplay.persistence` loads and saves the high score and the skin choice.
- `snakeplay.layout` holds the `Screen` enum, the `Button` geometry for each
  screen and `button_at`.
- `snakeplay.controller` holds `GameController`. It drives screens, input,
  timing, scoring, muting and skin choice from key presses, clicks and elapsed
  time. It collects the sounds to play in its `sounds` list and names the
  music track to play in `music`.
- `snakeplay.app` holds `Assets` and `SnakeApp`. These add the pygame window,
  drawing, sound and the main loop. The module also holds `main`, which is
  what the `snakeplay` command runs.

## Limitations

Menus are used with the mouse only, since there is no keyboard navigation.
There is no pause during play. Only one best score is kept, shared by all
board sizes.

## Running the tests

```
pip install .[test]
pytest
```