"""
Configuration - Environment driven settings.

    LIFECOUNTER_STATE_DIR       Directory holding the persisted session blob
    LIFECOUNTER_STARTING_LIFE   Starting life for fresh sessions (default 40)
    LIFECOUNTER_PLAYER_COUNT    Players in a fresh session (default 4)
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os

from .engine_core.coerce import coerce_int, clamp
from .engine_core.state import (
    DEFAULT_STARTING_LIFE,
    DEFAULT_PLAYER_COUNT,
    MIN_PLAYERS,
    MAX_PLAYERS,
)

# Environment configuration
LIFECOUNTER_STATE_DIR = os.getenv("LIFECOUNTER_STATE_DIR", None)
LIFECOUNTER_STARTING_LIFE = os.getenv("LIFECOUNTER_STARTING_LIFE", None)
LIFECOUNTER_PLAYER_COUNT = os.getenv("LIFECOUNTER_PLAYER_COUNT", None)


@dataclass
class Settings:
    """Resolved settings for a controller."""
    state_dir: Path
    starting_life: int = DEFAULT_STARTING_LIFE
    player_count: int = DEFAULT_PLAYER_COUNT


def load_settings(
    state_dir: str | Path | None = None,
    starting_life: object = None,
    player_count: object = None,
) -> Settings:
    """
    Build Settings from explicit values, falling back to the environment.

    Invalid numbers fall back to the defaults instead of raising.
    """
    if state_dir is None:
        state_dir = LIFECOUNTER_STATE_DIR
    if state_dir is None:
        state_dir = Path.home() / ".lifecounter"

    if starting_life is None:
        starting_life = LIFECOUNTER_STARTING_LIFE
    life = coerce_int(starting_life)
    if life is None or life < 1:
        life = DEFAULT_STARTING_LIFE

    if player_count is None:
        player_count = LIFECOUNTER_PLAYER_COUNT
    count = coerce_int(player_count)
    if count is None:
        count = DEFAULT_PLAYER_COUNT

    return Settings(
        state_dir=Path(state_dir).expanduser(),
        starting_life=life,
        player_count=clamp(count, MIN_PLAYERS, MAX_PLAYERS),
    )
