"""
physics_core.py: The shared, deterministic kinematic functions and collision logic.
"""

from .constants import GRAVITY, FLAP_VELOCITY, OBSTACLE_VELOCITY_X, BOARD_HEIGHT
from .data_models import Box


class PhysicsCore:
    """
    Deterministic per-tick physics. Every quantity is in pixels per tick,
    so one call advances the world by exactly one fixed timestep.
    """

    BOARD_HEIGHT = BOARD_HEIGHT

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """
        Calculates new position and velocity after one tick.
        The position is clamped so the character never leaves through the top.
        """
        velocity += GRAVITY
        y += velocity
        y = max(y, 0)
        return y, velocity

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return FLAP_VELOCITY

    def scroll(self, x: float) -> float:
        return x + OBSTACLE_VELOCITY_X

    @staticmethod
    def collides(a: Box, b: Box) -> bool:
        """Axis-aligned overlap test. Boxes that only share an edge or corner do not collide."""
        return (a.x < b.x + b.width and
                a.x + a.width > b.x and
                a.y < b.y + b.height and
                a.y + a.height > b.y)

    def out_of_bounds(self, y: float) -> bool:
        """True once the character has fallen past the bottom of the board."""
        return y > self.BOARD_HEIGHT
