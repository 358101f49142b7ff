"""The game window and its main loop."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable, Set
from pathlib import Path

import pygame

from .assets import Sprites
from .game import FrameInput, Game
from .render import Renderer
from .settings import GAME_SCREEN_HEIGHT, GAME_SCREEN_WIDTH

log = logging.getLogger(__name__)

TARGET_FPS = 144
MASTER_VOLUME = 0.5
MUSIC_VOLUME = 0.2

_KEY_NAMES = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
    pygame.K_RETURN: "enter",
    pygame.K_KP_ENTER: "enter",
    pygame.K_ESCAPE: "escape",
    pygame.K_p: "p",
    pygame.K_m: "m",
    pygame.K_y: "y",
    pygame.K_n: "n",
}


def _is_held(pressed_keys, key: int) -> bool:
    if isinstance(pressed_keys, Set):
        return key in pressed_keys
    try:
        return bool(pressed_keys[key])
    except (IndexError, KeyError):
        return False


def frame_input_from_events(
    events: Iterable[pygame.event.Event],
    pressed_keys,
    focused: bool,
    mouse_pos: tuple[float, float],
    dt: float,
) -> FrameInput:
    """Collect one frame of pygame events into a FrameInput.

    ``pressed_keys`` is the held-key state from pygame.key.get_pressed(),
    or a set of held key codes.
    """
    pressed: set[str] = set()
    mouse_pressed = mouse_released = close_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            close_requested = True
        elif event.type == pygame.KEYDOWN:
            name = _KEY_NAMES.get(event.key)
            if name is not None:
                pressed.add(name)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            mouse_pressed = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            mouse_released = True
    alt_down = _is_held(pressed_keys, pygame.K_LALT) or _is_held(pressed_keys, pygame.K_RALT)
    return FrameInput(
        pressed=frozenset(pressed),
        alt_down=alt_down,
        mouse_pressed=mouse_pressed,
        mouse_released=mouse_released,
        mouse_pos=(float(mouse_pos[0]), float(mouse_pos[1])),
        focused=focused,
        close_requested=close_requested,
        dt=dt,
    )


def _borderless_window() -> pygame.Surface:
    sizes = pygame.display.get_desktop_sizes()
    size = sizes[0] if sizes else (GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT)
    return pygame.display.set_mode(size, pygame.NOFRAME)


def _resizable_window() -> pygame.Surface:
    return pygame.display.set_mode((GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT), pygame.RESIZABLE)


def _load_audio(sounds_dir: Path) -> tuple[dict[str, pygame.mixer.Sound], bool]:
    try:
        pygame.mixer.init()
    except pygame.error as exc:
        log.warning("audio unavailable: %s", exc)
        return {}, False
    sounds = {}
    for name in ("eat", "wall"):
        try:
            sound = pygame.mixer.Sound(str(sounds_dir / f"{name}.mp3"))
        except (pygame.error, FileNotFoundError) as exc:
            log.warning("cannot load sound %s: %s", name, exc)
            continue
        sound.set_volume(MASTER_VOLUME)
        sounds[name] = sound
    try:
        pygame.mixer.music.load(str(sounds_dir / "music.mp3"))
    except (pygame.error, FileNotFoundError) as exc:
        log.warning("cannot load music: %s", exc)
        return sounds, False
    pygame.mixer.music.set_volume(MUSIC_VOLUME * MASTER_VOLUME)
    pygame.mixer.music.play(-1)
    return sounds, True


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player confirms exit."""
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play snake on a grid.")
    parser.add_argument("--assets", default=".", help="directory holding Graphics/ and Sounds/")
    parser.add_argument("--highscore", default="highscore.txt", help="file the high score is kept in")
    args = parser.parse_args(argv)

    assets = Path(args.assets)
    sprites = Sprites.load(assets / "Graphics")

    pygame.init()
    try:
        pygame.display.set_caption("Snake")
        screen = _borderless_window()
        sounds, has_music = _load_audio(assets / "Sounds")
        font = pygame.font.Font(None, 30)
        renderer = Renderer(sprites, font)
        game = Game(args.highscore, None, False, sounds)

        fullscreen = game.fullscreen
        music_paused = game.music_paused
        clock = pygame.time.Clock()
        dt = 0.0
        while not game.exit_window:
            frame = frame_input_from_events(
                pygame.event.get(),
                pygame.key.get_pressed(),
                pygame.key.get_focused(),
                pygame.mouse.get_pos(),
                dt,
            )
            game.update(frame)

            if game.fullscreen != fullscreen:
                fullscreen = game.fullscreen
                screen = _resizable_window() if fullscreen else _borderless_window()
            if has_music and game.music_paused != music_paused:
                music_paused = game.music_paused
                if music_paused:
                    pygame.mixer.music.pause()
                else:
                    pygame.mixer.music.unpause()

            renderer.present(screen, renderer.draw_frame(game))
            pygame.display.flip()
            dt = clock.tick(TARGET_FPS) / 1000.0
    finally:
        pygame.quit()
    return 0