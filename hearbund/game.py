"""The game object, its frame loop and the command that runs it."""

from __future__ import annotations

import logging
from typing import ClassVar, Optional

import pygame

from hearbund.entity import LoaderParams, Player
from hearbund.texture_manager import TextureError, TextureManager
from hearbund.tilemap import TileMap

logger = logging.getLogger(__name__)

BACKGROUND = (21, 25, 10)
FRAME_DELAY_MS = 16


class GameError(Exception):
    """Raised when the game cannot start or is used before it has started."""


class Game:
    """Owns the window, the level and the player, and runs one frame at a time."""

    _instance: ClassVar[Optional["Game"]] = None

    def __init__(self) -> None:
        self.screen: Optional[pygame.Surface] = None
        self.player: Optional[Player] = None
        self.tile_map: Optional[TileMap] = None
        self.running = False

    @classmethod
    def instance(cls) -> "Game":
        """Return the shared game, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def init(self, title: str, width: int, height: int, flags: int = 0) -> None:
        """Open the window, load the textures and build the level and player."""
        major, minor, _ = pygame.version.vernum
        logger.info("Compiled %d.%d", major, minor)
        try:
            pygame.display.init()
        except pygame.error as exc:
            logger.error("Error initalizing video : %s", exc)
            raise GameError(f"cannot initialise video: {exc}") from exc
        try:
            self.screen = pygame.display.set_mode((width, height), flags)
        except pygame.error as exc:
            logger.error("Error create window and renderer : %s", exc)
            raise GameError(f"cannot create window: {exc}") from exc
        pygame.display.set_caption(title)

        textures = TextureManager.instance()
        textures.load("Solider.png", "testTexture")
        textures.load("tilemap.png", "tilemap")
        logger.info("Window initialized")

        params = LoaderParams(320, 320, 32, 32, "tilemap")
        self.tile_map = TileMap()
        self.tile_map.load()
        self.player = Player(params, self.tile_map)
        self.running = True

    def _require_started(self) -> None:
        if self.player is None or self.tile_map is None or self.screen is None:
            raise GameError("the game has not been initialised")

    def update(self) -> None:
        """Advance the player by one frame."""
        self._require_started()
        self.player.update()

    def render(self) -> None:
        """Clear the window, draw the level and the player, and show the frame."""
        self._require_started()
        self.screen.fill(BACKGROUND)
        self.tile_map.draw(self.screen)
        self.player.draw(self.screen)
        pygame.display.flip()

    def handle_events(self) -> None:
        """Drain pending events; a quit request stops the game."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

    def clean(self) -> None:
        """Close the window and release textures."""
        if self.screen is not None:
            pygame.display.quit()
            logger.info("Destroy Window.")
            self.screen = None
        self.tile_map = None
        self.player = None
        self.running = False
        TextureManager.instance().clean()
        pygame.quit()


def main(argv=None) -> int:
    """Run the game until the window is closed."""
    game = Game.instance()
    try:
        game.init("HearBund", 640, 480, 0)
    except (GameError, TextureError) as exc:
        logger.error("%s", exc)
        game.clean()
        return 1
    while game.running:
        game.handle_events()
        game.update()
        game.render()
        pygame.time.delay(FRAME_DELAY_MS)
    game.clean()
    return 0