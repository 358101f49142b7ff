"""Drawing the game onto a fixed-size frame and scaling it to the window."""

from __future__ import annotations

from collections.abc import Mapping

import pygame

from .assets import FOOD_SPRITE
from .game import SCORE_WIDTH, Game, format_with_leading_zeroes
from .settings import CELL_COUNT, CELL_SIZE, GAME_SCREEN_HEIGHT, GAME_SCREEN_WIDTH, OFFSET

BACKGROUND = (0, 228, 48)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRID_COLOR = (128, 128, 128, 64)
PROMPT_BG = (0, 0, 0, 180)

_PROMPT_WIDTH = 700
_PROMPT_HEIGHT = 120
_PROMPT_ROUNDNESS = 0.76
_FONT_SIZE = 30
_TEXT_OFFSET_X = 300
_BOARD_PIXELS = CELL_SIZE * CELL_COUNT


def screen_scale(screen_size: tuple[int, int]) -> float:
    """Largest factor that fits the game frame inside ``screen_size``."""
    width, height = screen_size
    return min(width / GAME_SCREEN_WIDTH, height / GAME_SCREEN_HEIGHT)


def letterbox_rect(screen_size: tuple[int, int]) -> pygame.Rect:
    """Where the scaled game frame sits, centred on the screen."""
    width, height = screen_size
    scale = screen_scale(screen_size)
    frame_w = GAME_SCREEN_WIDTH * scale
    frame_h = GAME_SCREEN_HEIGHT * scale
    return pygame.Rect(
        round((width - frame_w) * 0.5),
        round((height - frame_h) * 0.5),
        round(frame_w),
        round(frame_h),
    )


class Renderer:
    """Draws a game's board, sprites and interface text."""

    def __init__(self, sprites: Mapping[str, pygame.Surface], font: pygame.font.Font) -> None:
        self.sprites = sprites
        self.font = font
        self._frame = pygame.Surface((GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT), 0, 32)

    def _text(self, surface: pygame.Surface, text: str, pos: tuple[float, float], color) -> None:
        surface.blit(self.font.render(text, True, color), (int(pos[0]), int(pos[1])))

    def draw_frame(self, game: Game) -> pygame.Surface:
        """Render the whole game onto the fixed-size frame and return it."""
        surface = self._frame
        surface.fill(BACKGROUND)
        game.snake.draw(surface, self.sprites)
        game.food.draw(surface, self.sprites[FOOD_SPRITE])
        self._draw_ui(surface, game)
        return surface

    def _draw_ui(self, surface: pygame.Surface, game: Game) -> None:
        help_x = OFFSET + (40 if game.is_mobile else 100)
        for y, line in zip((0, 40), game.help_lines()):
            self._text(surface, line, (help_x, y), BLACK)

        if not game.is_mobile:
            grid = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
            for i in range(CELL_COUNT + 1):
                pos = OFFSET + i * CELL_SIZE
                pygame.draw.line(grid, GRID_COLOR, (pos, OFFSET), (pos, OFFSET + _BOARD_PIXELS), 1)
                pygame.draw.line(grid, GRID_COLOR, (OFFSET, pos), (OFFSET + _BOARD_PIXELS, pos), 1)
            surface.blit(grid, (0, 0))

        border = pygame.Rect(OFFSET - 5, OFFSET - 5, _BOARD_PIXELS + 10, _BOARD_PIXELS + 10)
        pygame.draw.rect(surface, BLACK, border, width=5)

        score_y = OFFSET + _BOARD_PIXELS + 10
        self._text(surface, "Score: ", (OFFSET - 5, score_y), BLACK)
        self._text(
            surface, format_with_leading_zeroes(game.score, SCORE_WIDTH), (OFFSET - 5 + 110, score_y), BLACK
        )
        self._text(surface, "High Score: ", (OFFSET - 5 + 400, score_y), BLACK)
        self._text(
            surface,
            format_with_leading_zeroes(game.high_score, SCORE_WIDTH),
            (OFFSET - 5 + 590, score_y),
            BLACK,
        )

        prompt = game.prompt_text()
        if prompt is None:
            return
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        box = pygame.Rect(
            int((GAME_SCREEN_WIDTH - _PROMPT_WIDTH) * 0.5),
            int((GAME_SCREEN_HEIGHT - _PROMPT_HEIGHT) * 0.5),
            _PROMPT_WIDTH,
            _PROMPT_HEIGHT,
        )
        radius = int(_PROMPT_ROUNDNESS * min(_PROMPT_WIDTH, _PROMPT_HEIGHT) / 2)
        pygame.draw.rect(overlay, PROMPT_BG, box, border_radius=radius)
        surface.blit(overlay, (0, 0))
        self._text(surface, prompt, (self._prompt_x(game), (GAME_SCREEN_HEIGHT - _FONT_SIZE) * 0.5), WHITE)

    @staticmethod
    def _prompt_x(game: Game) -> float:
        if game.first_time_game_start and not game.exit_window_requested:
            if game.is_mobile:
                return (GAME_SCREEN_WIDTH - _TEXT_OFFSET_X + 100) * 0.5
            return (GAME_SCREEN_WIDTH - _TEXT_OFFSET_X) * 0.5
        return (GAME_SCREEN_WIDTH - _TEXT_OFFSET_X * 2) * 0.5

    def present(self, screen: pygame.Surface, frame_surface: pygame.Surface) -> None:
        """Scale the frame to fit ``screen`` with black bars around it."""
        screen.fill(BLACK)
        rect = letterbox_rect(screen.get_size())
        if rect.size == frame_surface.get_size():
            scaled = frame_surface
        elif frame_surface.get_bitsize() in (24, 32):
            scaled = pygame.transform.smoothscale(frame_surface, rect.size)
        else:
            scaled = pygame.transform.scale(frame_surface, rect.size)
        screen.blit(scaled, rect.topleft)