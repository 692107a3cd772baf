#!/usr/bin/env python3
"""
flappy_client.py

Window, input plumbing and the real-time loop around the simulation.
"""

import argparse
import logging
from typing import Optional

import pygame

from .constants import BOARD_WIDTH, BOARD_HEIGHT, WINDOW_TITLE, TICK_RATE
from .scheduler import Scheduler
from .simulation import Simulation
from .spawner import Spawner
from .renderer import Renderer, load_sprites, ASSETS_DIR


class FlappyClient:
    def __init__(self, seed: Optional[int] = None, assets_dir: Optional[str] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((BOARD_WIDTH, BOARD_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        # --- Game Logic ---
        self.simulation = Simulation()
        self.scheduler = Scheduler(simulation=self.simulation, spawner=Spawner(seed))
        self.renderer = Renderer(self.screen, load_sprites(assets_dir or ASSETS_DIR))

        # Time Management
        self.clock = pygame.time.Clock()
        self.running = False

    def handle_event(self, event) -> None:
        """Maps one pygame event onto the game's actions."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif (event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE) or event.type == pygame.MOUSEBUTTONDOWN:
            self.scheduler.press()

    def step(self, elapsed_ms: int) -> None:
        """Advances the simulation by wall-clock time and draws the result."""
        self.scheduler.advance(elapsed_ms)
        self.renderer.draw(self.simulation.snapshot())
        pygame.display.flip()

    def run(self):
        """The main client execution loop."""
        self.running = True
        while self.running:
            elapsed_ms = self.clock.tick(TICK_RATE)

            for event in pygame.event.get():
                self.handle_event(event)

            self.step(elapsed_ms)

        print(f"Exiting. Final score: {int(self.simulation.score)}")
        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Single-player Flappy Bird.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for obstacle placement (reproducible runs).")
    parser.add_argument("--assets", default=None, metavar="DIR",
                        help="Directory holding sprite PNGs (placeholders are drawn otherwise).")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log simulation events at debug level.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    client = FlappyClient(seed=args.seed, assets_dir=args.assets)
    client.run()


if __name__ == "__main__":
    main()
