import random

import pygame
import pytest

from gridsnake.food import Food
from gridsnake.settings import CELL_COUNT, cell_to_pixel

START = [(6, 9), (5, 9), (4, 9)]


def all_cells():
    return [(x, y) for x in range(CELL_COUNT) for y in range(CELL_COUNT)]


def test_initial_position_avoids_snake():
    for seed in range(50):
        food = Food(START, random.Random(seed))
        assert food.position not in START


def test_random_cell_within_board():
    food = Food(START, random.Random(1))
    for _ in range(500):
        x, y = food.random_cell()
        assert 0 <= x < CELL_COUNT
        assert 0 <= y < CELL_COUNT


def test_random_cell_reaches_corners():
    food = Food(START, random.Random(2))
    seen = {food.random_cell() for _ in range(20000)}
    assert (0, 0) in seen
    assert (CELL_COUNT - 1, CELL_COUNT - 1) in seen


def test_random_position_single_free_cell():
    cells = all_cells()
    free = cells.pop(137)
    food = Food(START, random.Random(3))
    assert food.random_position(cells) == free


def test_full_board_raises():
    food = Food(START, random.Random(4))
    with pytest.raises(ValueError):
        food.random_position(all_cells())


def test_respawn_updates_position():
    food = Food(START, random.Random(5))
    body = [c for c in all_cells() if c != (2, 3)]
    assert food.respawn(body) == (2, 3)
    assert food.position == (2, 3)


def test_same_seed_same_sequence():
    first = Food(START, random.Random(9))
    second = Food(START, random.Random(9))
    other = Food(START, random.Random(10))
    assert first.position == second.position
    assert first.position not in START
    first_cells = [first.random_cell() for _ in range(10)]
    second_cells = [second.random_cell() for _ in range(10)]
    other_cells = [other.random_cell() for _ in range(10)]
    assert first_cells == second_cells
    assert first_cells != other_cells


def test_draw_blits_at_cell():
    food = Food(START, random.Random(6))
    food.position = (1, 1)
    sprite = pygame.Surface((5, 5))
    sprite.fill((10, 200, 30))
    surface = pygame.Surface((1000, 1000))
    surface.fill((0, 0, 0))
    food.draw(surface, sprite)
    px, py = cell_to_pixel((1, 1))
    assert surface.get_at((px, py))[:3] == (10, 200, 30)
    assert surface.get_at((px + 5, py))[:3] == (0, 0, 0)