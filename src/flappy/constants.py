"""
constants.py: Centralized configuration for board geometry, physics and timing.
"""

# -------- Board Config --------
BOARD_WIDTH = 360
BOARD_HEIGHT = 640
WINDOW_TITLE = "Flappy Bird"

# -------- Character Config --------
CHARACTER_X = BOARD_WIDTH // 8       # Fixed horizontal position (45)
CHARACTER_Y = BOARD_HEIGHT // 2      # Start / respawn height (320)
CHARACTER_WIDTH = 34
CHARACTER_HEIGHT = 24

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 64
OBSTACLE_HEIGHT = 512
OBSTACLE_Y = 0                       # Nominal top edge before the random offset
SPAWN_X = BOARD_WIDTH                # Pairs enter just off the right edge
GAP_SIZE = BOARD_HEIGHT // 4         # Vertical opening between a pair (160)
PRUNE_X = 0                          # Obstacles with right edge <= this are dropped

# -------- Physics Config (pixels / tick) --------
GRAVITY = 1                          # Added to the vertical velocity every tick
FLAP_VELOCITY = -25                  # Velocity assigned on flap (negative = up)
OBSTACLE_VELOCITY_X = -4             # Horizontal scroll per tick

# -------- Timing Config --------
TICK_RATE = 60                       # Target ticks per second
TICK_INTERVAL_MS = 1000 // TICK_RATE # Fixed timestep in whole milliseconds
SPAWN_INTERVAL_MS = 1500             # New obstacle pair every 1.5 simulated seconds
SCORE_PER_OBSTACLE = 0.5             # Two obstacles per pair => 1 point per gap

# -------- HUD Config --------
SCORE_POS = (10, 35)
FONT_NAME = "arial"
FONT_SIZE = 32
