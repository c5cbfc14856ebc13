"""
Runtime configuration for the Snake engine.

Values come from the environment (a .env file is loaded if present):
 - SNAKE_COLS / SNAKE_ROWS: board size (default 24x24)
 - SNAKE_OBSTACLES: obstacle count (blank means one per 50 cells)
 - SNAKE_BOUNDARY: 'bounded' or 'toroidal' (default toroidal)
 - SNAKE_TICK_MS: logical tick length in milliseconds (default 120)
 - SNAKE_SEED: optional seed for food/obstacle placement
 - LOG_LEVEL: logging level for the CLI (default INFO)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import (
    BOUNDARY_POLICIES,
    DEFAULT_BOUNDARY,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    DEFAULT_TICK_MS,
)

load_dotenv()


@dataclass
class GameConfig:
    cols: int = DEFAULT_COLS
    rows: int = DEFAULT_ROWS
    obstacle_count: Optional[int] = None
    boundary: str = DEFAULT_BOUNDARY
    tick_ms: int = DEFAULT_TICK_MS
    seed: Optional[int] = None
    log_level: str = "INFO"


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None


def load_config() -> GameConfig:
    """
    Build a GameConfig from environment variables.

    Raises:
        ValueError: If a variable is present but malformed
    """
    boundary = os.getenv("SNAKE_BOUNDARY", DEFAULT_BOUNDARY).strip().lower()
    if boundary not in BOUNDARY_POLICIES:
        raise ValueError(
            f"SNAKE_BOUNDARY must be one of {sorted(BOUNDARY_POLICIES)}, got '{boundary}'"
        )

    config = GameConfig(
        cols=_int_env("SNAKE_COLS", DEFAULT_COLS),
        rows=_int_env("SNAKE_ROWS", DEFAULT_ROWS),
        obstacle_count=_int_env("SNAKE_OBSTACLES", None),
        boundary=boundary,
        tick_ms=_int_env("SNAKE_TICK_MS", DEFAULT_TICK_MS),
        seed=_int_env("SNAKE_SEED", None),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

    if config.cols <= 0 or config.rows <= 0:
        raise ValueError(f"SNAKE_COLS and SNAKE_ROWS must be positive, got {config.cols}x{config.rows}")
    if config.tick_ms <= 0:
        raise ValueError(f"SNAKE_TICK_MS must be positive, got {config.tick_ms}")

    return config
