"""The level grid and its collision lookup."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from hearbund.texture_manager import TextureManager

COLUMNS = 20
ROWS = 15
TILE_SIZE = 32

SOLID = 1

# Tile value -> (texture id, sprite-sheet row, frame)
_TILE_SPRITES = {
    1: ("tilemap", 2, 3),
    2: ("testTexture", 1, 3),
    3: ("testTexture", 1, 5),
    4: ("testTexture", 1, 6),
}


@dataclass(frozen=True)
class Vector2D:
    """A point in pixel coordinates."""

    x: float
    y: float


class TileMap:
    """A COLUMNS x ROWS grid of tiles, indexed as ``grid[x][y]``."""

    def __init__(self) -> None:
        self.grid: list[list[int]] = [[0] * ROWS for _ in range(COLUMNS)]
        self.tiles: list[list[pygame.Rect]] = self._make_rects()

    @staticmethod
    def _make_rects() -> list[list[pygame.Rect]]:
        return [
            [pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE) for y in range(ROWS)]
            for x in range(COLUMNS)
        ]

    def load(self) -> None:
        """Build the level: a solid floor on row 12 and three single blocks."""
        self.grid = [[0] * ROWS for _ in range(COLUMNS)]
        for column in self.grid:
            column[12] = SOLID
        for x, y in ((3, 11), (6, 5), (8, 10)):
            self.grid[x][y] = SOLID
        self.tiles = self._make_rects()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every non-empty tile with its sprite."""
        textures = TextureManager.instance()
        for column, rects in zip(self.grid, self.tiles):
            for value, rect in zip(column, rects):
                sprite = _TILE_SPRITES.get(value)
                if sprite is None:
                    continue
                texture_id, row, frame = sprite
                textures.draw_frame(
                    texture_id, rect.x, rect.y, TILE_SIZE, TILE_SIZE, row, frame, surface
                )

    def get_rects(self, x: float, y: float) -> list[Vector2D]:
        """Return the corners of solid tiles in the 2x2 cells around (x, y).

        Cells are scanned row by row; cells outside the map count as empty.
        """
        left = math.floor(x / TILE_SIZE)
        top = math.floor(y / TILE_SIZE)
        found = []
        for row in (top, top + 1):
            for col in (left, left + 1):
                if 0 <= col < COLUMNS and 0 <= row < ROWS and self.grid[col][row] == SOLID:
                    found.append(Vector2D(float(col * TILE_SIZE), float(row * TILE_SIZE)))
        return found