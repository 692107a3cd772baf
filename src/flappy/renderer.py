"""
renderer.py: Draws a simulation snapshot with pygame.

Sprites are opaque resources looked up by role. Nothing here changes game state.

No sprite files ship with the package, so colored placeholders are the
default. Drop the PNGs named in SPRITE_FILES into `flappy/assets/` (they
are picked up as package data) or point `--assets` at a directory holding them.
"""

import logging
import os
from typing import Dict, Optional

import pygame

from .constants import BOARD_WIDTH, BOARD_HEIGHT, SCORE_POS, FONT_NAME, FONT_SIZE

logger = logging.getLogger(__name__)

ASSETS_DIR = os.path.join(os.path.dirname(__file__), "assets")

SPRITE_FILES = {
    "background": "flappybirdbg.png",
    "character": "flappybird.png",
    "top": "toppipe.png",
    "bottom": "bottompipe.png",
}

# Placeholder colors used when a sprite file is missing
PLACEHOLDER_COLORS = {
    "background": (0, 191, 255),
    "character": (255, 215, 0),
    "top": (0, 150, 0),
    "bottom": (0, 150, 0),
}

WHITE = (255, 255, 255)


def load_sprites(assets_dir: str = ASSETS_DIR) -> Dict[str, Optional[pygame.Surface]]:
    """Loads every sprite that exists on disk. Missing or unreadable files map to None."""
    sprites: Dict[str, Optional[pygame.Surface]] = {}
    for handle, filename in SPRITE_FILES.items():
        path = os.path.join(assets_dir, filename)
        sprites[handle] = None
        if not os.path.isfile(path):
            logger.debug("No sprite for %s at %s, using placeholder", handle, path)
            continue
        try:
            sprites[handle] = pygame.image.load(path)
        except pygame.error as e:
            logger.warning("Failed to load %s: %s", path, e)
    return sprites


class Renderer:
    def __init__(self, screen: pygame.Surface, sprites: Optional[Dict[str, Optional[pygame.Surface]]] = None):
        self.screen = screen
        self.sprites = sprites if sprites is not None else load_sprites()
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self._scaled: Dict[tuple, pygame.Surface] = {}

    def _blit(self, handle: str, rect):
        x, y, w, h = (int(v) for v in rect)
        image = self.sprites.get(handle)
        if image is None:
            pygame.draw.rect(self.screen, PLACEHOLDER_COLORS[handle], (x, y, w, h))
            return

        key = (handle, w, h)
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.scale(image, (w, h))
        self.screen.blit(self._scaled[key], (x, y))

    @staticmethod
    def score_text(score: float, game_over: bool) -> str:
        if game_over:
            return f"Game Over: {int(score)}"
        return str(int(score))

    def draw(self, snapshot: dict):
        """Renders one frame from the state dictionary produced by Simulation.snapshot()."""
        self._blit("background", (0, 0, BOARD_WIDTH, BOARD_HEIGHT))
        self._blit("character", snapshot["character"])

        for obstacle in snapshot["obstacles"]:
            self._blit(obstacle["role"], obstacle["rect"])

        # HUD
        text = self.font.render(self.score_text(snapshot["score"], snapshot["game_over"]), True, WHITE)
        self.screen.blit(text, (SCORE_POS[0], SCORE_POS[1] - self.font.get_ascent()))
