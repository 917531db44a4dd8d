"""
Centralized configuration for the team generation engine.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _parse_bool(env_var: str, default: bool) -> bool:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


BALANCER_SETTINGS: dict[str, Any] = {
    # Fair mode uses the snake draft up to this many players, skill tiers above it
    "snake_draft_max_players": _parse_int("SNAKE_DRAFT_MAX_PLAYERS", 30),
    "snake_draft_iterations": _parse_int("SNAKE_DRAFT_ITERATIONS", 50),
    "tiered_iterations": _parse_int("TIERED_ITERATIONS", 75),
    # Optimizer stops a pass once the stddev of team averages drops below this
    "balance_threshold": _parse_float("BALANCE_THRESHOLD", 0.15),
    "max_tier_count": _parse_int("MAX_TIER_COUNT", 8),
    "skill_band_width": _parse_float("SKILL_BAND_WIDTH", 0.2),
    "checkpoint_interval": _parse_int("CHECKPOINT_INTERVAL", 10),
    "randomized_tier_assignment": _parse_bool("RANDOMIZED_TIER_ASSIGNMENT", True),
}

# Fair requests above this size are logged and still run through the tiered path
TIERED_MAX_PLAYERS = _parse_int("TIERED_MAX_PLAYERS", 99)

# Generation advisor thresholds
MIN_PLAYERS_PER_TEAM = _parse_int("MIN_PLAYERS_PER_TEAM", 2)
MAX_PLAYERS_PER_TEAM = _parse_int("MAX_PLAYERS_PER_TEAM", 8)
OPTIMAL_MIN_PLAYERS_PER_TEAM = _parse_int("OPTIMAL_MIN_PLAYERS_PER_TEAM", 4)
SIGNIFICANT_SKILL_GAP = _parse_float("SIGNIFICANT_SKILL_GAP", 3.0)
