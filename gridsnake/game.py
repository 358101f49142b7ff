"""Game state and rules: input handling, collisions, scoring and prompts."""

from __future__ import annotations

import logging
import math
import random
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from .food import Food
from .settings import CELL_COUNT, GAME_SCREEN_WIDTH
from .snake import Direction, Snake

log = logging.getLogger(__name__)

STARTING_SNAKE_UPDATE_TIME = 0.1
SNAKE_UPDATE_TIME_INCREMENT = 0.000083333
SNAKE_UPDATE_TIME_LIMIT = 0.06
SWIPE_THRESHOLD = 20.0
TITLE_BAR_HEIGHT = 50
SCORE_WIDTH = 7

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class KeyPress(Enum):
    """The last direction key the player pressed."""

    UP = Direction.UP
    DOWN = Direction.DOWN
    LEFT = Direction.LEFT
    RIGHT = Direction.RIGHT


_DIRECTION_KEYS: tuple[tuple[KeyPress, frozenset[str]], ...] = (
    (KeyPress.UP, frozenset({"up", "w"})),
    (KeyPress.DOWN, frozenset({"down", "s"})),
    (KeyPress.LEFT, frozenset({"left", "a"})),
    (KeyPress.RIGHT, frozenset({"right", "d"})),
)


@dataclass(frozen=True)
class FrameInput:
    """Everything the game reads from the player during one frame.

    ``pressed`` holds the names of keys pressed this frame: "up", "down",
    "left", "right", "w", "a", "s", "d", "enter", "escape", "p", "m", "y", "n".
    """

    pressed: frozenset[str] = frozenset()
    alt_down: bool = False
    mouse_pressed: bool = False
    mouse_released: bool = False
    mouse_pos: tuple[float, float] = (0.0, 0.0)
    focused: bool = True
    close_requested: bool = False
    dt: float = 0.0


def format_with_leading_zeroes(number: int, width: int) -> str:
    """Pad the decimal form of ``number`` with zeroes on the left to ``width``.

    Raises ValueError if the number is already wider than ``width``.
    """
    text = str(number)
    padding = width - len(text)
    if padding < 0:
        raise ValueError(f"{number} does not fit in {width} characters")
    return "0" * padding + text


def load_high_score(path: str | Path | None) -> int:
    """Read the saved high score; 0 if there is none or it cannot be read."""
    if path is None:
        return 0
    try:
        text = Path(path).read_text()
    except OSError:
        log.warning("Failed to load highscore from file %s", path)
        return 0
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def save_high_score(path: str | Path, score: int) -> None:
    """Write ``score`` as the saved high score."""
    Path(path).write_text(str(score))


class Game:
    """One game of snake, advanced a frame at a time."""

    def __init__(
        self,
        high_score_path: str | Path | None = "highscore.txt",
        rng: random.Random | None = None,
        is_mobile: bool = False,
        sounds: Mapping[str, Any] | None = None,
    ) -> None:
        self.high_score_path = high_score_path
        self.rng = rng if rng is not None else random.Random()
        self.is_mobile = is_mobile
        self.sounds: Mapping[str, Any] = sounds if sounds is not None else {}
        self.snake = Snake()
        self.food = Food(self.snake.body, self.rng)
        self.first_time_game_start = True
        self.exit_window_requested = False
        self.exit_window = False
        self.fullscreen = False
        self.music_paused = False
        self.init_game()

    def init_game(self) -> None:
        """Put every per-game value back to its starting state."""
        self.score = 0
        self.high_score = load_high_score(self.high_score_path)
        self.is_first_frame_after_reset = True
        self.is_in_exit_menu = False
        self.paused = False
        self.lost_window_focus = False
        self.game_over_flag = False
        self.won = False
        self.time_since_snake_update = 0.0
        self.snake_update_time = STARTING_SNAKE_UPDATE_TIME
        self.snake.reset()
        self.food.respawn(self.snake.body)
        self.touch_start_pos: tuple[float, float] = (0.0, 0.0)
        self.touch_movement: tuple[float, float] = (0.0, 0.0)
        self.key_press: KeyPress | None = None

    def reset(self) -> None:
        self.init_game()

    @property
    def is_over(self) -> bool:
        return self.game_over_flag

    def running(self) -> bool:
        """True while the snake is allowed to move."""
        return not (
            self.first_time_game_start
            or self.paused
            or self.lost_window_focus
            or self.is_in_exit_menu
            or self.game_over_flag
        )

    def _play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()

    def update(self, frame: FrameInput) -> None:
        """Advance the game by one frame."""
        if "m" in frame.pressed:
            self.music_paused = not self.music_paused

        self.update_ui(frame)

        if self.running():
            self.read_input(frame)
            self.time_since_snake_update += frame.dt
            if self.time_since_snake_update >= self.snake_update_time:
                self.process_input()
                self.time_since_snake_update = 0.0
                self.snake.update()

            self.check_collisions()

            if len(self.snake.body) >= CELL_COUNT * CELL_COUNT - 1:
                self.game_win()

    def update_ui(self, frame: FrameInput) -> None:
        """Handle menus, pausing, focus and full-screen toggling."""
        pressed = frame.pressed
        if frame.close_requested or ("escape" in pressed and not self.exit_window_requested):
            self.exit_window_requested = True
            self.is_in_exit_menu = True
            return

        if "enter" in pressed and frame.alt_down:
            self.fullscreen = not self.fullscreen

        if self.first_time_game_start:
            if self.is_mobile and frame.mouse_pressed:
                self.first_time_game_start = False
                return
            if "enter" in pressed:
                self.first_time_game_start = False
        elif self.game_over_flag:
            if self.is_mobile and frame.mouse_pressed:
                self.reset()
                return
            if "enter" in pressed:
                self.reset()

        if self.exit_window_requested:
            if "y" in pressed:
                self.exit_window = True
            elif "n" in pressed or "escape" in pressed:
                self.exit_window_requested = False
                self.is_in_exit_menu = False

        self.lost_window_focus = not frame.focused

        if (
            not self.exit_window_requested
            and not self.lost_window_focus
            and not self.game_over_flag
            and not self.is_first_frame_after_reset
        ):
            if self.is_mobile:
                if frame.mouse_pressed:
                    self.touch_start_pos = frame.mouse_pos
                elif frame.mouse_released:
                    end_x, end_y = frame.mouse_pos
                    start_x, start_y = self.touch_start_pos
                    distance = math.hypot(end_x - start_x, end_y - start_y)
                    if (
                        distance < SWIPE_THRESHOLD
                        and 0 <= end_x <= GAME_SCREEN_WIDTH
                        and 0 <= end_y <= TITLE_BAR_HEIGHT
                    ):
                        self.paused = not self.paused
            elif "p" in pressed:
                self.paused = not self.paused

    def read_input(self, frame: FrameInput) -> None:
        """Remember the swipe or direction key of this frame."""
        if self.is_first_frame_after_reset:
            self.is_first_frame_after_reset = False
            return

        if self.is_mobile and not self.first_time_game_start and not self.game_over_flag:
            if frame.mouse_released:
                end_x, end_y = frame.mouse_pos
                start_x, start_y = self.touch_start_pos
                self.touch_movement = (end_x - start_x, end_y - start_y)

        for key_press, names in _DIRECTION_KEYS:
            if names & frame.pressed:
                self.key_press = key_press
                break

    def _turn(self, direction: Direction) -> None:
        if self.snake.direction != direction.opposite:
            self.snake.direction = direction

    def process_input(self) -> None:
        """Turn the snake according to the remembered swipe or key."""
        if self.first_time_game_start or self.game_over_flag:
            return
        if self.is_mobile:
            dx, dy = self.touch_movement
            if math.hypot(dx, dy) < SWIPE_THRESHOLD:
                return
            if abs(dx) > abs(dy):
                if dx > 0 and self.snake.direction != Direction.LEFT:
                    self.snake.direction = Direction.RIGHT
                elif dx < 0 and self.snake.direction != Direction.RIGHT:
                    self.snake.direction = Direction.LEFT
            else:
                if dy > 0 and self.snake.direction != Direction.UP:
                    self.snake.direction = Direction.DOWN
                elif dy < 0 and self.snake.direction != Direction.DOWN:
                    self.snake.direction = Direction.UP
        elif self.key_press is not None:
            self._turn(self.key_press.value)

    def check_collisions(self) -> None:
        """Eat food, and end the game on hitting a wall or the snake itself."""
        head = self.snake.head()
        if head == tuple(self.food.position):
            self.food.respawn(self.snake.body)
            self.score += 1
            self.check_for_high_score()
            self.snake.grow()
            self._play("eat")
            if self.snake_update_time > SNAKE_UPDATE_TIME_LIMIT:
                self.snake_update_time -= SNAKE_UPDATE_TIME_INCREMENT

        x, y = head
        if x in (CELL_COUNT, -1):
            self.game_over()
        if y in (CELL_COUNT, -1):
            self.game_over()

        for i, cell in enumerate(self.snake.body):
            if i > 0 and cell == head:
                self.game_over()

    def game_over(self) -> None:
        self.game_over_flag = True
        self._play("wall")

    def game_win(self) -> None:
        self.won = True
        self.game_over_flag = True
        self._play("eat")

    def check_for_high_score(self) -> None:
        """Raise and save the high score when the score passes it."""
        if self.score > self.high_score:
            self.high_score = self.score
            if self.high_score_path is not None:
                try:
                    save_high_score(self.high_score_path, self.high_score)
                except OSError:
                    log.warning("Failed to save highscore to file %s", self.high_score_path)

    def prompt_text(self) -> str | None:
        """The message shown in the centre of the board, if any."""
        if self.exit_window_requested:
            return "Are you sure you want to exit? [Y/N]"
        if self.first_time_game_start:
            return "Tap to play" if self.is_mobile else "Press ENTER to play"
        if self.paused:
            if self.is_mobile:
                return "Game paused, tap title bar to continue"
            return "Game paused, press P to continue"
        if self.lost_window_focus:
            return "Game paused, focus window to continue"
        if self.game_over_flag:
            if self.won:
                if self.is_mobile:
                    return "You Win! Tap to play again"
                return "You Win! Press ENTER to play again"
            if self.is_mobile:
                return "Game over, tap to play again"
            return "Game over, press ENTER to play again"
        return None

    def help_lines(self) -> tuple[str, str]:
        """The two lines of controls shown above the board."""
        if self.is_mobile:
            return (
                "Swipe to control, tap title bar to pause",
                "For best experience play the desktop version",
            )
        return (
            "WASD to play, ESC: exit, P: pause",
            "Alt+Enter: fullscreen, M: toggle music",
        )