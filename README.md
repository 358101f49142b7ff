# gridsnake

A snake arcade game on a 25 × 25 grid. Steer the snake to the apple. Each apple adds a segment, adds one point and makes the snake move a little faster, down to a fixed limit. The game ends if you hit a wall or your own body. If the snake fills the board, you win.

## Installing

```
pip install .
```

This also installs pygame, which the game uses for its window, graphics and sound.

## Playing

```
gridsnake
```

Options:

- `--assets DIR`: the directory that holds `Graphics/` and `Sounds/`. The default is the current directory.
- `--highscore FILE`: the file that holds the high score. The default is `highscore.txt`.

The game starts in a borderless window the size of the desktop. **Alt + Enter** switches to a resizable window and back. The playfield keeps its proportions and is centred, with black bars around it. On the start screen, press **Enter** to begin.

| Key              | Action                                       |
|------------------|----------------------------------------------|
| W A S D / arrows | Change direction                             |
| P                | Pause or resume                              |
| M                | Toggle background music                      |
| Alt + Enter      | Switch between borderless and resizable window |
| Esc              | Ask to quit (Y confirms, N or Esc cancels)   |
| Enter            | Start, or play again after the game ends     |

Closing the window also asks whether you want to quit. The snake cannot turn straight back on itself. The game pauses while the window does not have focus.

Your score is shown under the board as a seven-digit number, with the high score beside it. The high score is read from the high-score file each time a game starts. It is written back whenever you beat it. If the file cannot be read, the high score starts at 0.

## Assets

`Graphics/` must hold `apple.png` and the snake sprites:

- `head_up.png`, `head_down.png`, `head_left.png`, `head_right.png`
- `tail_up.png`, `tail_down.png`, `tail_left.png`, `tail_right.png`
- `body_horizontal.png`, `body_vertical.png`
- `body_topleft.png`, `body_topright.png`, `body_bottomleft.png`, `body_bottomright.png`

If any of these is missing, the game stops with `FileNotFoundError`.

`Sounds/` may hold `eat.mp3`, `wall.mp3` and `music.mp3`. If a sound is missing or audio is unavailable, the game logs a warning and plays without it. Text uses pygame's built-in font.

## Using it as a library

The rules do not need a display, so you can drive a game yourself:

- `gridsnake.settings` holds the board geometry, together with `cell_in` and `cell_to_pixel`.
- `gridsnake.snake.Snake` is the snake's body (head first) and its movement. `Direction` is the set of four grid steps. `Snake.segment_sprites()` names the sprite for each segment.
- `gridsnake.food.Food` places the apple on a random free cell. It raises `ValueError` when no cell is free.
- `gridsnake.game.Game` holds the rules, the menus and the scoring.
  - Step it one frame at a time with `Game.update(frame)`, where `frame` is a `gridsnake.game.FrameInput` naming the keys pressed that frame.
  - `Game.prompt_text()` and `Game.help_lines()` give the messages to show.
  - Pass `high_score_path=None` to keep the high score out of files.
  - Pass `is_mobile=True` for swipe controls, where a tap in the top 50 pixels pauses.
- `gridsnake.game` also has the helpers `format_with_leading_zeroes`, `load_high_score` and `save_high_score`.
- `gridsnake.assets.Sprites.load(directory)` loads the sprite images.
- `gridsnake.render.Renderer` draws a `Game` onto a fixed-size surface and scales it to a screen. `screen_scale` and `letterbox_rect` compute the fit.
- `gridsnake.app.frame_input_from_events` turns pygame events into a `FrameInput`.

## What it does not do

The `gridsnake` command always uses keyboard controls. Swipe controls are only available when you build a `Game` yourself with `is_mobile=True`. There is no browser build.

## Running the tests

```
pip install .[test]
pytest
```