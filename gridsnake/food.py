"""The food item placed on a free cell of the board."""

from __future__ import annotations

import random
from collections.abc import Iterable

import pygame

from .settings import CELL_COUNT, Cell, cell_in, cell_to_pixel


class Food:
    """A piece of food at a grid cell not covered by the snake."""

    def __init__(self, snake_body: Iterable[Cell], rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.position: Cell = self.random_position(snake_body)

    def random_cell(self) -> Cell:
        """Any cell of the board, chosen uniformly."""
        x = self.rng.randint(0, CELL_COUNT - 1)
        y = self.rng.randint(0, CELL_COUNT - 1)
        return x, y

    def random_position(self, snake_body: Iterable[Cell]) -> Cell:
        """A random cell that the snake does not cover.

        Raises ValueError if the snake covers the whole board.
        """
        occupied = {tuple(cell) for cell in snake_body}
        board = {(x, y) for x in range(CELL_COUNT) for y in range(CELL_COUNT)}
        if board <= occupied:
            raise ValueError("no free cell left for food")
        position = self.random_cell()
        while cell_in(position, occupied):
            position = self.random_cell()
        return position

    def respawn(self, snake_body: Iterable[Cell]) -> Cell:
        """Move to a new free cell and return it."""
        self.position = self.random_position(snake_body)
        return self.position

    def draw(self, surface: pygame.Surface, sprite: pygame.Surface) -> None:
        surface.blit(sprite, cell_to_pixel(self.position))