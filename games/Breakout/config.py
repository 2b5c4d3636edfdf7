"""Configuration for Breakout.

Contains screen dimensions, entity sizes, physics constants, scoring
rules and color definitions. Every setting can be overridden
from the environment or a .env file next to this module.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

from models import Color

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_positive_float(key: str, default: float) -> float:
    """Get a strictly positive float from environment."""
    value = _get_float(key, default)
    if value <= 0:
        raise ValueError(f'{key} must be positive, got {value}')
    return value


def _get_color(key: str, default: str) -> Color:
    """Get an "r, g, b" color from environment."""
    return Color.parse(os.getenv(key, default))


# Display (initial window size, the window is resizable)
SCREEN_WIDTH: int = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT: int = _get_int('SCREEN_HEIGHT', 600)
FPS: int = _get_int('FPS', 60)
RESIZABLE: bool = _get_bool('RESIZABLE', True)

# Ball
BALL_SIZE: float = _get_positive_float('BALL_SIZE', 50.0)
BALL_SPEED: float = _get_float('BALL_SPEED', 400.0)  # pixels/second
BALL_SPAWN_HEIGHT: float = _get_float('BALL_SPAWN_HEIGHT', 50.0)  # above paddle top
BALL_START_OFFSET_Y: float = _get_float('BALL_START_OFFSET_Y', 100.0)  # below screen middle

# Player paddle
PLAYER_WIDTH: float = _get_positive_float('PLAYER_WIDTH', 150.0)
PLAYER_HEIGHT: float = _get_positive_float('PLAYER_HEIGHT', 40.0)
PLAYER_SPEED: float = _get_float('PLAYER_SPEED', 700.0)  # pixels/second
# Paddle row is this far from the bottom; balls at or below it are lost
PLAYER_BOTTOM_OFFSET: float = _get_float('PLAYER_BOTTOM_OFFSET', 100.0)

# Block grid
BLOCK_WIDTH: float = _get_positive_float('BLOCK_WIDTH', 100.0)
BLOCK_HEIGHT: float = _get_positive_float('BLOCK_HEIGHT', 40.0)
GRID_COLUMNS: int = _get_int('GRID_COLUMNS', 6)
GRID_ROWS: int = _get_int('GRID_ROWS', 6)
GRID_PADDING: float = _get_float('GRID_PADDING', 5.0)
GRID_TOP: float = _get_float('GRID_TOP', 50.0)
SPECIAL_BLOCK_COUNT: int = _get_int('SPECIAL_BLOCK_COUNT', 3)

# Rules
BLOCK_LIVES: int = _get_int('BLOCK_LIVES', 1)
BLOCK_POINTS: int = _get_int('BLOCK_POINTS', 10)
STARTING_LIVES: int = _get_int('STARTING_LIVES', 3)

# Text
TITLE_FONT_SIZE: int = 50
HUD_FONT_SIZE: int = 30
HUD_MARGIN: float = 30.0
HUD_TOP: float = 40.0

# Color tags used by entities and skins ("r, g, b" in the environment)
COLORS: Dict[str, Color] = {
    'background': _get_color('COLOR_BACKGROUND', '255, 255, 255'),
    'text': _get_color('COLOR_TEXT', '0, 0, 0'),
    'player': _get_color('COLOR_PLAYER', '0, 121, 241'),
    'ball': _get_color('COLOR_BALL', '80, 80, 80'),
    'block': _get_color('COLOR_BLOCK', '255, 161, 0'),
    'block_tough': _get_color('COLOR_BLOCK_TOUGH', '230, 41, 55'),
    'block_spawner': _get_color('COLOR_BLOCK_SPAWNER', '0, 228, 48'),
}
