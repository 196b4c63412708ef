"""
constants.py: Centralized configuration for the playfield, physics and visuals.
"""

import math

# -------- Display & Timing --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
FPS = 60                        # Simulation ticks per second (one per rendered frame)
WINDOW_TITLE = "Flappy Bird"

# -------- Game World Config --------
GROUND_HEIGHT = 50
GROUND_Y = SCREEN_HEIGHT - GROUND_HEIGHT
GRASS_HEIGHT = 10

# -------- Bird Config --------
BIRD_X = 80                     # Fixed bird X position
BIRD_WIDTH = 30
BIRD_HEIGHT = 30
RESPAWN_Y = SCREEN_HEIGHT / 2

# -------- Physics Config (pixels / tick) --------
GRAVITY = 0.5                   # Added to velocity every tick
JUMP_POWER = -8.0               # Velocity set (not added) on flap
ROTATION_FACTOR = 0.1           # Radians of tilt per unit of velocity
MIN_ROTATION = -math.pi / 4
MAX_ROTATION = math.pi / 2

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_GAP = 150
PIPE_SPACING = 200              # Horizontal distance before the next pipe spawns
PIPE_SPEED = 2
PIPE_MARGIN = 50                # Minimum barrier extent above and below the gap
PIPE_CAP_HEIGHT = 20
PIPE_CAP_OVERHANG = 5

assert PIPE_MARGIN * 2 + PIPE_GAP < GROUND_Y, "pipe gap does not fit the playfield"

# -------- Cloud Config --------
CLOUD_COUNT = 5
CLOUD_MIN_SIZE = 20
CLOUD_SIZE_RANGE = 30
CLOUD_MIN_SPEED = 0.2
CLOUD_SPEED_RANGE = 0.5

# -------- Persistence --------
DB_FILE = "flappy_scores.db"
BEST_SCORE_KEY = "flappyBirdBestScore"

# -------- Colors (RGB / RGBA) --------
COLOR_SKY_TOP = (135, 206, 235)
COLOR_SKY_BOTTOM = (152, 251, 152)
COLOR_CLOUD = (255, 255, 255, 204)
COLOR_PIPE = (34, 139, 34)
COLOR_PIPE_CAP = (0, 100, 0)
COLOR_GROUND = (139, 69, 19)
COLOR_GRASS = (34, 139, 34)
COLOR_BIRD = (255, 215, 0)
COLOR_WING = (255, 165, 0)
COLOR_EYE = (0, 0, 0)
COLOR_BEAK = (255, 99, 71)
COLOR_OVERLAY = (0, 0, 0, 178)
COLOR_TEXT = (255, 255, 255)
COLOR_BUTTON = (255, 140, 0)
COLOR_BUTTON_BORDER = (255, 255, 255)
