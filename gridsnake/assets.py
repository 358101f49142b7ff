"""Loading the sprite images used by the snake and the food."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import pygame

SNAKE_SPRITES = (
    "head_up",
    "head_down",
    "head_left",
    "head_right",
    "tail_up",
    "tail_down",
    "tail_left",
    "tail_right",
    "body_horizontal",
    "body_vertical",
    "body_topleft",
    "body_topright",
    "body_bottomleft",
    "body_bottomright",
)
FOOD_SPRITE = "apple"
SPRITE_NAMES = (FOOD_SPRITE, *SNAKE_SPRITES)


def sprite_path(directory: str | Path, name: str) -> Path:
    """Path of the PNG image for sprite ``name`` inside ``directory``."""
    return Path(directory) / f"{name}.png"


@dataclass(frozen=True)
class Sprites(Mapping):
    """The loaded sprite images, looked up by name."""

    images: dict[str, pygame.Surface] = field(default_factory=dict)

    @classmethod
    def load(cls, directory: str | Path) -> Sprites:
        """Load every sprite from ``directory``; raise FileNotFoundError if one is missing."""
        images = {}
        for name in SPRITE_NAMES:
            path = sprite_path(directory, name)
            if not path.is_file():
                raise FileNotFoundError(f"missing sprite image: {path}")
            images[name] = pygame.image.load(str(path))
        return cls(images)

    def __getitem__(self, name: str) -> pygame.Surface:
        return self.images[name]

    def __iter__(self):
        return iter(self.images)

    def __len__(self) -> int:
        return len(self.images)