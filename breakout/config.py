"""Configuration for the breakout game.

Contains screen dimensions, frame pacing, paddle and ball physics
constants, the brick grid layout and color definitions.

Display and session settings can be overridden from the environment or
from a ``.env`` file next to this module.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from breakout.models import Color

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


# Display settings
SCREEN_WIDTH: int = _get_int('SCREEN_WIDTH', 1280)
SCREEN_HEIGHT: int = _get_int('SCREEN_HEIGHT', 720)
WINDOW_TITLE: str = "BreakOut"
TARGET_FPS: int = _get_int('TARGET_FPS', 60)

# Session
STARTING_LIVES: int = _get_int('STARTING_LIVES', 3)

# Ball (velocity is pixels per frame, there is no delta-time scaling)
BALL_SIZE: int = 10
BALL_START_VX: float = 2.0
BALL_START_VY: float = 2.0

# Paddle
PADDLE_WIDTH: int = 100
PADDLE_HEIGHT: int = 20
PADDLE_BOTTOM_OFFSET: int = 50          # Paddle center sits this far above the bottom
PADDLE_ACCELERATION_STEP: float = 0.1   # Per frame while a direction is held
PADDLE_MAX_ACCELERATION: float = 0.3
PADDLE_FRICTION: float = PADDLE_ACCELERATION_STEP * 2
PADDLE_STOP_THRESHOLD: float = 2.0      # Below this speed an idle paddle stops dead
PADDLE_WALL_BOUNCE: float = -0.5        # Velocity factor when pushed off a wall

# Brick grid
BRICK_WIDTH: int = 48
BRICK_HEIGHT: int = 10
BRICKS_PER_ROW: int = 20
BRICK_ROWS: int = 4
BRICK_START_X: int = 50
BRICK_STEP_X: int = 50
BRICK_START_Y: int = 50
BRICK_STEP_Y: int = 15

# Boundaries are one pixel thick strips along each window edge
BOUNDARY_THICKNESS: int = 1

# Colors
RAYWHITE = Color(r=245, g=245, b=245)
LIGHTGRAY = Color(r=200, g=200, b=200)
BLACK = Color(r=0, g=0, b=0)

BACKGROUND_COLOR = BLACK
ENTITY_COLOR = RAYWHITE
HUD_COLOR = LIGHTGRAY

# HUD layout
HUD_FONT_SIZE: int = 20
HUD_MARGIN: int = 25
HUD_LIVES_OFFSET: int = 100             # Lives text starts this far from the right edge
GAME_OVER_FONT_SIZE: int = 40
GAME_OVER_OFFSET_X: int = 25
