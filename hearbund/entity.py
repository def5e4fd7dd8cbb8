"""Game entities: spawn parameters, the drawable base entity and the player."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import pygame

from hearbund.texture_manager import TextureManager
from hearbund.tilemap import TILE_SIZE, TileMap

logger = logging.getLogger(__name__)

MOVE_SPEED = 3.0
# Distance kept from a tile's edge once a collision is resolved.
_PUSH_OUT = TILE_SIZE + 0.0001


@dataclass(frozen=True)
class LoaderParams:
    """Where an entity starts, how large it is and which texture it uses."""

    x: float
    y: float
    width: float
    height: float
    texture_id: str


class PhysicsEntity:
    """An entity with a position that draws one frame of its sprite sheet."""

    def __init__(self, params: LoaderParams) -> None:
        self.x = params.x
        self.y = params.y
        self.width = params.width
        self.height = params.height
        self.texture_id = params.texture_id
        # Sprite-sheet row and frame, both counted from 1.
        self.current_row = 1
        self.current_frame = 1

    def update(self) -> None:
        """Advance the entity by one tick."""
        logger.info("is called")

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the entity's current frame at its position."""
        TextureManager.instance().draw_frame(
            self.texture_id,
            self.x,
            self.y,
            self.width,
            self.height,
            self.current_row,
            self.current_frame,
            surface,
        )

    def clean(self) -> None:
        """Release what the entity holds; a plain entity holds nothing."""


class Player(PhysicsEntity):
    """The keyboard-driven player, kept out of solid tiles of a map."""

    def __init__(self, params: LoaderParams, tilemap: TileMap) -> None:
        super().__init__(params)
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.acceleration_y = 0.5
        self.on_ground = False
        self.tilemap = tilemap
        self.current_frame = 2
        self.current_row = 3

    def handle_input(self, keys: Any) -> None:
        """Set the velocity from pressed keys; ``keys`` is indexed by pygame key codes.

        D wins over A and S wins over W when both are held.
        """
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        if keys[pygame.K_a]:
            self.velocity_x = -MOVE_SPEED
        if keys[pygame.K_d]:
            self.velocity_x = MOVE_SPEED
        if keys[pygame.K_w]:
            self.velocity_y = -MOVE_SPEED
        if keys[pygame.K_s]:
            self.velocity_y = MOVE_SPEED

    def update(self, keys: Optional[Any] = None) -> None:
        """Read input, then move along x and then y, stopping at solid tiles.

        Without ``keys`` the current keyboard state is read from pygame.
        """
        if keys is None:
            keys = pygame.key.get_pressed()
        self.handle_input(keys)

        new_x = self.x + self.velocity_x
        for tile in self.tilemap.get_rects(new_x, self.y):
            if self.velocity_x > 0:
                new_x = tile.x - _PUSH_OUT
            elif self.velocity_x < 0:
                new_x = tile.x + _PUSH_OUT

        new_y = self.y + self.velocity_y
        for tile in self.tilemap.get_rects(new_x, new_y):
            if self.velocity_y > 0:
                new_y = tile.y - _PUSH_OUT
            elif self.velocity_y < 0:
                new_y = tile.y + _PUSH_OUT

        self.x = new_x
        self.y = new_y