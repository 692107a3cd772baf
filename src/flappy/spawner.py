"""
spawner.py: Decides the vertical placement of each new obstacle pair.
"""

import random
from typing import Optional

from .constants import OBSTACLE_Y, OBSTACLE_HEIGHT


class Spawner:
    """
    Produces the top edge of the upper obstacle for each pair.

    Offsets fall within half an obstacle height below a nominal position a
    quarter obstacle above the board, so the gap wanders up and down.
    Passing a seed makes the sequence reproducible.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def next_gap_offset(self) -> float:
        return OBSTACLE_Y - OBSTACLE_HEIGHT / 4 - self.rng.random() * (OBSTACLE_HEIGHT / 2)
