"""Centralized configuration and palette definitions for Arcade Snake."""

from __future__ import annotations

import math
import os
import sys
from pathlib import Path

import pygame


def _default_data_dir() -> Path:
    """Return a platform-appropriate user data directory for saves."""

    if sys.platform.startswith("win"):
        base = Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / "arcade-snake"


DATA_DIR = Path(os.getenv("ARCADE_SNAKE_DATA_DIR") or _default_data_dir())
LOG_LEVEL: str = os.getenv("ARCADE_SNAKE_LOG_LEVEL", "WARNING").upper()
HIGHSCORE_KEY: str = "snakeHighScore"

WINDOW_SIZE: int = 400  # 400 / 20 => 20px cells
GRID_SIZE: int = 20
HUD_HEIGHT: int = 36
FONT_NAME: str = "consolas"
FONT_SIZE: int = 20
HUD_FONT_SIZE: int = 18
TITLE_FONT_SIZE: int = 40

FPS: int = 60

# Simulation timing, all in milliseconds
BASE_SPEED_MS: int = 150
SPEED_STEP_MS: int = 10
MIN_SPEED_MS: int = 70
SPEED_UP_EVERY: int = 50
FOOD_POINTS: int = 10
FOOD_PLACEMENT_ATTEMPTS: int = 200

# Cosmetic effect rates, per millisecond of frame delta
GLOW_RATE: float = 0.003
GLOW_MIN: float = 0.5
GLOW_MAX: float = 1.0
PULSE_RATE: float = 0.005
PULSE_PERIOD: float = math.tau
EAT_BURST_MS: float = 300.0
BODY_GAP: int = 2
BODY_FADE: float = 0.6
HEAD_GLOW_PX: int = 10
FOOD_GLOW_PX: int = 10

# Touch/mouse gestures
SWIPE_MIN_DISTANCE: int = 12
DOUBLE_TAP_MS: int = 300

DIRECTIONS: dict[str, tuple[int, int]] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
OPPOSITE: dict[str, str] = {
    "up": "down",
    "down": "up",
    "left": "right",
    "right": "left",
}
KEY_TO_DIRECTION = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
}
PAUSE_KEYS = (pygame.K_p,)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)

PALETTE = {
    "bg": pygame.Color(10, 10, 14),
    "grid": pygame.Color(34, 34, 34),
    "food": pygame.Color(255, 56, 96),
    "snake": pygame.Color(57, 255, 20),
    "eye": pygame.Color(0, 0, 0),
    "burst": pygame.Color(255, 255, 255),
    "text": pygame.Color(255, 255, 255),
    "hud": pygame.Color(18, 18, 24),
    "dim": pygame.Color(0, 0, 0, 128),
    "screen": pygame.Color(0, 0, 0, 190),
}
