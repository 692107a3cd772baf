"""
scheduler.py: Fixed-timestep driver for the simulation.

Two independent periodic triggers share one virtual millisecond clock:
the tick trigger advances physics, the spawn trigger adds obstacle pairs.
The same driver serves the real-time window loop and headless tests.
"""

from dataclasses import dataclass, field

from .constants import TICK_INTERVAL_MS, SPAWN_INTERVAL_MS
from .data_models import GameState
from .simulation import Simulation
from .spawner import Spawner


@dataclass
class Scheduler:
    simulation: Simulation = field(default_factory=Simulation)
    spawner: Spawner = field(default_factory=Spawner)
    tick_interval_ms: int = TICK_INTERVAL_MS
    spawn_interval_ms: int = SPAWN_INTERVAL_MS
    now_ms: int = 0
    next_tick_ms: int = -1
    next_spawn_ms: int = -1

    def __post_init__(self):
        if self.next_tick_ms < 0 or self.next_spawn_ms < 0:
            self._start_timers()

    def _start_timers(self):
        self.next_tick_ms = self.now_ms + self.tick_interval_ms
        self.next_spawn_ms = self.now_ms + self.spawn_interval_ms

    def advance(self, elapsed_ms: int) -> int:
        """
        Moves the clock forward and fires every trigger that came due, in
        time order. A tick due at the same moment as a spawn runs first.
        Returns the number of ticks run.
        """
        target = self.now_ms + elapsed_ms
        ticks = 0

        while not self.simulation.game_over:
            due = min(self.next_tick_ms, self.next_spawn_ms)
            if due > target:
                break
            self.now_ms = due

            if self.next_tick_ms == due:
                self.simulation.tick()
                self.next_tick_ms += self.tick_interval_ms
                ticks += 1
            else:
                self.simulation.spawn_obstacle_pair(self.spawner.next_gap_offset())
                self.next_spawn_ms += self.spawn_interval_ms

        self.now_ms = target
        if self.simulation.game_over:
            # Timers stay one interval ahead of the clock while over
            self._start_timers()
        return ticks

    def run_ticks(self, count: int) -> int:
        """Advances until `count` ticks have run or the game ends."""
        ran = 0
        while ran < count and not self.simulation.game_over:
            ran += self.advance(self.next_tick_ms - self.now_ms)
        return ran

    def press(self) -> GameState:
        """Routes the primary action to the simulation."""
        return self.simulation.press()
