"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import (
    CHARACTER_X, CHARACTER_Y, CHARACTER_WIDTH, CHARACTER_HEIGHT,
    OBSTACLE_WIDTH, OBSTACLE_HEIGHT, SPAWN_X, OBSTACLE_Y
)


class GameState(Enum):
    RUNNING = "running"
    OVER = "over"


class ObstacleRole(Enum):
    """Which half of a pair an obstacle is; the renderer picks its sprite from this."""
    TOP = "top"
    BOTTOM = "bottom"


@dataclass
class Box:
    """An axis-aligned rectangle with its origin at the top-left corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_rect(self) -> tuple:
        return (self.x, self.y, self.width, self.height)


@dataclass
class Character(Box):
    """The player-controlled character. Only its height and velocity change."""
    x: float = CHARACTER_X
    y: float = CHARACTER_Y
    width: float = CHARACTER_WIDTH
    height: float = CHARACTER_HEIGHT
    velocity: float = 0.0

    def reset(self):
        self.x = CHARACTER_X
        self.y = CHARACTER_Y
        self.velocity = 0.0


@dataclass
class Obstacle(Box):
    """One half (upper or lower) of an obstacle pair."""
    x: float = SPAWN_X
    y: float = OBSTACLE_Y
    width: float = OBSTACLE_WIDTH
    height: float = OBSTACLE_HEIGHT
    role: ObstacleRole = ObstacleRole.TOP
    passed: bool = False

    def to_render_state(self):
        """Minimal dictionary consumed by the renderer."""
        return {
            "rect": self.to_rect(),
            "role": self.role.value,
        }
