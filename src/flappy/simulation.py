"""
simulation.py: The authoritative single-player game simulation.
"""

import logging
from typing import List, Tuple
from dataclasses import dataclass, field

from .constants import SPAWN_X, OBSTACLE_WIDTH, OBSTACLE_HEIGHT, GAP_SIZE, PRUNE_X, SCORE_PER_OBSTACLE
from .data_models import Character, Obstacle, ObstacleRole, GameState
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class Simulation(PhysicsCore):
    """
    Owns the character and the ordered obstacle list and advances them one
    tick at a time. Inherits kinematics and collision from PhysicsCore.
    """
    character: Character = field(default_factory=Character)
    obstacles: List[Obstacle] = field(default_factory=list)
    score: float = 0.0
    game_over: bool = False
    tick_count: int = 0

    @property
    def state(self) -> GameState:
        return GameState.OVER if self.game_over else GameState.RUNNING

    def tick(self) -> GameState:
        """
        The main simulation step. Mutates character and obstacle state.
        Does nothing once the game is over.
        """
        if self.game_over:
            return self.state

        bird = self.character

        # 1. Gravity and vertical movement
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)

        # 2. Scroll obstacles, award passes, check for hits
        for obstacle in self.obstacles:
            obstacle.x = self.scroll(obstacle.x)

            if not obstacle.passed and bird.x > obstacle.right:
                obstacle.passed = True
                self.score += SCORE_PER_OBSTACLE

            if self.collides(bird, obstacle):
                self.game_over = True

        # 3. Fell off the bottom of the board
        if self.out_of_bounds(bird.y):
            self.game_over = True

        # 4. Drop obstacles that have scrolled off the left edge
        self.obstacles = [o for o in self.obstacles if o.right > PRUNE_X]

        self.tick_count += 1
        if self.game_over:
            logger.info("Game over at tick %d. Score: %d", self.tick_count, int(self.score))
        return self.state

    def flap(self) -> float:
        """Sets the upward flap velocity. Ignored once the game is over."""
        if not self.game_over:
            self.character.velocity = super().flap()
        return self.character.velocity

    def restart(self):
        """Puts the game back into its initial running state."""
        self.obstacles.clear()
        self.character.reset()
        self.score = 0.0
        self.game_over = False
        self.tick_count = 0
        logger.debug("Simulation restarted")

    def press(self) -> GameState:
        """The single primary action: flap while running, restart once over."""
        if self.game_over:
            self.restart()
        else:
            self.flap()
        return self.state

    def spawn_obstacle_pair(self, gap_offset: float) -> Tuple[Obstacle, Obstacle]:
        """Appends an upper/lower pair whose opening starts below the upper obstacle."""
        top = Obstacle(x=SPAWN_X, y=gap_offset, width=OBSTACLE_WIDTH,
                       height=OBSTACLE_HEIGHT, role=ObstacleRole.TOP)
        bottom = Obstacle(x=SPAWN_X, y=top.bottom + GAP_SIZE, width=OBSTACLE_WIDTH,
                          height=OBSTACLE_HEIGHT, role=ObstacleRole.BOTTOM)
        self.obstacles.append(top)
        self.obstacles.append(bottom)
        logger.debug("Spawned obstacle pair, gap at y=%.1f", bottom.y - GAP_SIZE)
        return top, bottom

    def snapshot(self):
        """Prepares a read-only state dictionary for the renderer."""
        return {
            "character": self.character.to_rect(),
            "obstacles": [o.to_render_state() for o in self.obstacles],
            "score": self.score,
            "game_over": self.game_over,
        }
