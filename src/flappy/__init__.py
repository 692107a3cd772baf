"""
Single-player Flappy Bird: a deterministic per-tick simulation with a pygame front end.
"""

from .data_models import Box, Character, Obstacle, ObstacleRole, GameState
from .physics_core import PhysicsCore
from .simulation import Simulation
from .spawner import Spawner
from .scheduler import Scheduler

__version__ = "0.1.0"
