"""The snake: its body, movement and the sprites for each segment."""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping
from enum import Enum

import pygame

from .settings import CELL_SIZE, Cell, cell_to_pixel

START_BODY: tuple[Cell, ...] = ((6, 9), (5, 9), (4, 9))


class Direction(Enum):
    """A unit step on the grid."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))


def _corner_sprite(to_prev: Cell, to_next: Cell) -> str | None:
    (px, py), (nx, ny) = to_prev, to_next
    for name, hx, vy in (
        ("body_topright", 1, -1),
        ("body_topleft", -1, -1),
        ("body_bottomright", 1, 1),
        ("body_bottomleft", -1, 1),
    ):
        if (px == hx and ny == vy) or (nx == hx and py == vy):
            return name
    return None


class Snake:
    """A snake moving one cell per update, head first in ``body``."""

    def __init__(self) -> None:
        self.body: deque[Cell] = deque(START_BODY)
        self.direction = Direction.RIGHT
        self.is_growing = False

    def reset(self) -> None:
        """Return to the starting body and direction."""
        self.body = deque(START_BODY)
        self.direction = Direction.RIGHT

    def grow(self) -> None:
        """Make the next update add a segment instead of moving the tail."""
        self.is_growing = True

    def update(self) -> None:
        """Advance one cell in the current direction."""
        if self.is_growing:
            self.is_growing = False
        else:
            self.body.pop()
        x, y = self.body[0]
        self.body.appendleft((x + self.direction.dx, y + self.direction.dy))

    def head(self) -> Cell:
        return self.body[0]

    def segment_sprites(self) -> list[tuple[Cell, str]]:
        """Pair each body cell with the name of the sprite that draws it."""
        segments: list[tuple[Cell, str]] = []
        last = len(self.body) - 1
        for i, (x, y) in enumerate(self.body):
            if i == 0:
                if self.direction.dx == 1:
                    name = "head_right"
                elif self.direction.dx == -1:
                    name = "head_left"
                elif self.direction.dy == 1:
                    name = "head_down"
                else:
                    name = "head_up"
            elif i == last:
                prev_x, prev_y = self.body[i - 1]
                if prev_x < x:
                    name = "tail_right"
                elif prev_x > x:
                    name = "tail_left"
                elif prev_y < y:
                    name = "tail_down"
                else:
                    name = "tail_up"
            else:
                prev_x, prev_y = self.body[i - 1]
                next_x, next_y = self.body[i + 1]
                to_prev = (prev_x - x, prev_y - y)
                to_next = (next_x - x, next_y - y)
                if to_prev[1] == 0 and to_next[1] == 0:
                    name = "body_horizontal"
                elif to_prev[0] == 0 and to_next[0] == 0:
                    name = "body_vertical"
                else:
                    corner = _corner_sprite(to_prev, to_next)
                    if corner is None:
                        continue
                    name = corner
            segments.append(((x, y), name))
        return segments

    def draw(self, surface: pygame.Surface, sprites: Mapping[str, pygame.Surface]) -> None:
        """Blit every segment, scaled to one cell, onto ``surface``."""
        for cell, name in self.segment_sprites():
            image = pygame.transform.scale(sprites[name], (CELL_SIZE, CELL_SIZE))
            surface.blit(image, cell_to_pixel(cell))