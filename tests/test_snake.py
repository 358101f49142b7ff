import pygame
import pytest

from gridsnake.settings import CELL_SIZE, cell_to_pixel
from gridsnake.snake import Direction, Snake


def test_initial_state():
    snake = Snake()
    assert list(snake.body) == [(6, 9), (5, 9), (4, 9)]
    assert snake.direction is Direction.RIGHT
    assert snake.is_growing is False
    assert snake.head() == (6, 9)


def test_update_moves_without_growing():
    snake = Snake()
    before = list(snake.body)
    snake.update()
    assert len(snake.body) == len(before)
    assert snake.head() == (before[0][0] + 1, before[0][1])
    assert list(snake.body)[1:] == before[:-1]


def test_grow_adds_segment_once():
    snake = Snake()
    snake.grow()
    snake.update()
    assert len(snake.body) == 4
    assert snake.is_growing is False
    snake.update()
    assert len(snake.body) == 4


def test_direction_change_moves_head():
    snake = Snake()
    snake.direction = Direction.UP
    snake.update()
    assert snake.head() == (6, 8)


def test_reset_restores_start():
    snake = Snake()
    snake.direction = Direction.DOWN
    snake.grow()
    snake.update()
    snake.update()
    snake.reset()
    assert list(snake.body) == [(6, 9), (5, 9), (4, 9)]
    assert snake.direction is Direction.RIGHT


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_move_returns_head(direction):
    snake = Snake()
    start = snake.head()
    snake.direction = direction
    snake.update()
    assert snake.head() != start
    snake.direction = direction.opposite
    snake.update()
    assert snake.head() == start


def test_segment_sprites_straight():
    snake = Snake()
    names = [name for _, name in snake.segment_sprites()]
    assert names == ["head_right", "body_horizontal", "tail_left"]


def test_segment_sprites_corner():
    snake = Snake()
    snake.direction = Direction.UP
    snake.update()
    assert snake.segment_sprites() == [
        ((6, 8), "head_up"),
        ((6, 9), "body_topleft"),
        ((5, 9), "tail_left"),
    ]


def test_segment_sprites_vertical():
    snake = Snake()
    snake.direction = Direction.DOWN
    snake.update()
    snake.update()
    names = [name for _, name in snake.segment_sprites()]
    assert names == ["head_down", "body_vertical", "tail_up"]


def test_draw_blits_head_sprite():
    snake = Snake()
    names = {name for _, name in snake.segment_sprites()}
    sprites = {}
    for name in names:
        image = pygame.Surface((40, 40))
        image.fill((255, 0, 0) if name.startswith("head") else (0, 0, 255))
        sprites[name] = image
    surface = pygame.Surface((1000, 1000))
    surface.fill((0, 0, 0))
    snake.draw(surface, sprites)
    hx, hy = cell_to_pixel(snake.head())
    assert surface.get_at((hx, hy))[:3] == (255, 0, 0)
    assert surface.get_at((hx + CELL_SIZE - 1, hy + CELL_SIZE - 1))[:3] == (255, 0, 0)
    assert surface.get_at((hx + CELL_SIZE, hy))[:3] == (0, 0, 0)
    tx, ty = cell_to_pixel(snake.body[-1])
    assert surface.get_at((tx, ty))[:3] == (0, 0, 255)


def test_draw_missing_sprite_raises():
    with pytest.raises(KeyError):
        Snake().draw(pygame.Surface((10, 10)), {})