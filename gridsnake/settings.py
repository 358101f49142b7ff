"""Board geometry, colours and small helpers shared across the game."""

from __future__ import annotations

from collections.abc import Iterable

Cell = tuple[int, int]
Color = tuple[int, int, int, int]

GREEN: Color = (173, 204, 96, 255)
DARK_GREEN: Color = (43, 51, 24, 255)
GREY: Color = (29, 29, 27, 255)
YELLOW: Color = (243, 216, 63, 255)

CELL_SIZE = 30
CELL_COUNT = 25
OFFSET = 75

GAME_SCREEN_WIDTH = 2 * OFFSET + CELL_SIZE * CELL_COUNT
GAME_SCREEN_HEIGHT = 2 * OFFSET + CELL_SIZE * CELL_COUNT

MINIMIZE_OFFSET = 50
BORDER_OFFSET_WIDTH = 20.0
BORDER_OFFSET_HEIGHT = 50.0


def cell_in(cell: Cell, cells: Iterable[Cell]) -> bool:
    """Return True if ``cell`` equals any of ``cells``."""
    target = tuple(cell)
    return any(tuple(other) == target for other in cells)


def cell_to_pixel(cell: Cell) -> tuple[int, int]:
    """Top-left pixel of a grid cell on the game screen."""
    x, y = cell
    return OFFSET + x * CELL_SIZE, OFFSET + y * CELL_SIZE