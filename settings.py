# settings.py
import os
from pathlib import Path

WIDTH, HEIGHT = 800, 400
TITLE = "Power Runner"

# World (screen coordinates, y grows downward like a canvas)
GROUND_LEVEL = HEIGHT - 30
PLAYER_X = 50
PLAYER_SIZE = 30
OBSTACLE_SIZE = 30
POWERUP_SIZE = 20

# Physics (per tick)
GRAVITY = 0.5
JUMP_FORCE = -12.0
HIGH_JUMP_FORCE = -18.0

# Spawning / difficulty
START_OBSTACLE_SPEED = 5.0
START_OBSTACLE_INTERVAL = 1200.0   # ms
MIN_OBSTACLE_INTERVAL = 500.0      # ms
POWERUP_INTERVAL = 5000.0          # ms
SPEED_STEP = 0.0005                # px/tick added every tick
INTERVAL_STEP = 0.05               # ms removed every tick
POWERUP_MIN_LIFT = 40              # px above the ground
POWERUP_LIFT_RANGE = 80            # px of random extra height

# Power-ups
POWERUP_DURATION = 5000.0          # ms
BOOSTED_MULTIPLIER = 2

# Score
POINTS_PER_SECOND = 10

# Background
PARALLAX_SPEED = 1.0
STAR_COUNT = 50
START_MESSAGE_MS = 1500.0

# Colors (RGBA)
SKY = (135, 206, 235, 255)
GROUND = (107, 94, 84, 255)
STAR = (204, 204, 204, 255)
PLAYER_COLOR = (77, 184, 255, 255)
OBST = (255, 77, 77, 255)
SHIELD_RING = (255, 255, 255, 204)
WHITE = (255, 255, 255, 255)
GOLD = (255, 215, 0, 255)
SHIELD_BLUE = (0, 191, 255, 255)
LIME = (50, 205, 50, 255)
VIOLET = (138, 43, 226, 255)

# Persistence
HIGHSCORE_KEY = "highScore"
HIGHSCORE_PATH = Path(os.environ.get("POWER_RUNNER_HIGHSCORE",
                                     Path(__file__).parent / "highscore.json"))
