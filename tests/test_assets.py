from pathlib import Path

import pygame
import pytest

from gridsnake.assets import SPRITE_NAMES, Sprites, sprite_path


def write_sprites(directory, names):
    for index, name in enumerate(names):
        image = pygame.Surface((4, 4))
        image.fill((index, 100, 200))
        pygame.image.save(image, str(sprite_path(directory, name)))


def test_sprite_path():
    assert sprite_path("Graphics", "apple") == Path("Graphics") / "apple.png"


def test_loaded_sprites_cover_food_and_snake(tmp_path):
    write_sprites(tmp_path, SPRITE_NAMES)
    sprites = Sprites.load(tmp_path)
    names = set(sprites)
    assert "apple" in names
    assert "head_up" in names
    assert "body_bottomright" in names
    assert len(names) == 15


def test_load_round_trip(tmp_path):
    write_sprites(tmp_path, SPRITE_NAMES)
    sprites = Sprites.load(tmp_path)
    assert set(sprites) == set(SPRITE_NAMES)
    assert len(sprites) == len(SPRITE_NAMES)
    for index, name in enumerate(SPRITE_NAMES):
        assert sprites[name].get_size() == (4, 4)
        assert sprites[name].get_at((0, 0))[:3] == (index, 100, 200)


def test_load_missing_file(tmp_path):
    write_sprites(tmp_path, SPRITE_NAMES[:-1])
    with pytest.raises(FileNotFoundError):
        Sprites.load(tmp_path)


def test_unknown_name_raises(tmp_path):
    write_sprites(tmp_path, SPRITE_NAMES)
    sprites = Sprites.load(tmp_path)
    assert sprites["apple"].get_size() == (4, 4)
    assert "dragon" not in set(sprites)
    with pytest.raises(KeyError):
        _ = sprites["dragon"]