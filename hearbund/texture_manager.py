"""Loading, caching and blitting of sprite-sheet textures."""

from __future__ import annotations

import logging
from enum import Enum
from typing import ClassVar, Optional

import pygame

logger = logging.getLogger(__name__)


class TextureError(Exception):
    """Raised when an image cannot be turned into a texture."""


class FlipMode(Enum):
    """How a texture is mirrored when it is drawn."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2

    @property
    def flip_x(self) -> bool:
        return self is FlipMode.HORIZONTAL

    @property
    def flip_y(self) -> bool:
        return self is FlipMode.VERTICAL


class TextureManager:
    """Keeps textures by id and draws them, or frames of them, onto surfaces."""

    _instance: ClassVar[Optional["TextureManager"]] = None

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}

    @classmethod
    def instance(cls) -> "TextureManager":
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load(self, filename, texture_id: str) -> None:
        """Load an image file and register it under ``texture_id``."""
        try:
            image = pygame.image.load(str(filename))
        except (pygame.error, OSError) as exc:
            logger.error("Error loading image : %s %s", filename, exc)
            raise TextureError(f"cannot load image {filename!r}: {exc}") from exc
        self._textures[texture_id] = image
        logger.info("Texture Loaded : %s", filename)

    def draw(
        self,
        texture_id: str,
        x: float,
        y: float,
        width: float,
        height: float,
        surface: pygame.Surface,
        flip: FlipMode = FlipMode.NONE,
    ) -> None:
        """Draw the top-left ``width`` x ``height`` region of a texture at (x, y)."""
        self._blit_region(texture_id, 0, 0, x, y, width, height, surface, flip)

    def draw_frame(
        self,
        texture_id: str,
        x: float,
        y: float,
        width: float,
        height: float,
        current_row: int,
        current_frame: int,
        surface: pygame.Surface,
        flip: FlipMode = FlipMode.NONE,
    ) -> None:
        """Draw one frame of a sprite sheet; rows and frames count from 1."""
        src_x = width * (current_frame - 1)
        src_y = height * (current_row - 1)
        self._blit_region(texture_id, src_x, src_y, x, y, width, height, surface, flip)

    def get_texture(self, texture_id: str) -> Optional[pygame.Surface]:
        """Return the texture registered under ``texture_id``, or None."""
        return self._textures.get(texture_id)

    def clean(self) -> None:
        """Forget every loaded texture."""
        for texture_id in sorted(self._textures):
            logger.info("Clean : %s", texture_id)
        self._textures.clear()

    def _blit_region(
        self,
        texture_id: str,
        src_x: float,
        src_y: float,
        x: float,
        y: float,
        width: float,
        height: float,
        surface: pygame.Surface,
        flip: FlipMode,
    ) -> None:
        texture = self._textures.get(texture_id)
        if texture is None:
            logger.warning("No texture named %s", texture_id)
            return
        size = (max(int(width), 0), max(int(height), 0))
        if size[0] == 0 or size[1] == 0:
            return
        frame = pygame.Surface(size, pygame.SRCALPHA)
        frame.blit(texture, (0, 0), pygame.Rect(int(src_x), int(src_y), *size))
        if flip is not FlipMode.NONE:
            frame = pygame.transform.flip(frame, flip.flip_x, flip.flip_y)
        surface.blit(frame, (int(x), int(y)))