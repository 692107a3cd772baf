import os

# Render without opening a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy.simulation import Simulation
from flappy.spawner import Spawner
from flappy.scheduler import Scheduler


@pytest.fixture
def sim():
    return Simulation()


@pytest.fixture
def scheduler():
    return Scheduler(simulation=Simulation(), spawner=Spawner(seed=7))
