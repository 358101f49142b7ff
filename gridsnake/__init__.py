"""A grid-based snake arcade game: rules, sprites, rendering and a pygame window."""

__version__ = "1.0.0"