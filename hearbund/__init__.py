"""A small pygame tile-map game: textures, level grid, player and game loop."""

__version__ = "0.1.0"
__all__ = ["entity", "game", "texture_manager", "tilemap"]