"""
Roster Manager - Grows and shrinks the player list.

Truncation is destructive: dropped players are gone for good, and any
commander damage other players took from them stays behind as a dangling
entry.
"""

from __future__ import annotations
from typing import Any
import logging

from .coerce import coerce_int, clamp
from .factory import PlayerFactory
from .state import Session, MIN_PLAYERS, MAX_PLAYERS, DEFAULT_STARTING_LIFE

logger = logging.getLogger(__name__)


def ensure_count(session: Session, count: Any, factory: PlayerFactory | None = None) -> int:
    """
    Make the roster exactly `count` players long.

    Non-numeric counts read as 1; the result is clamped to [1, 6].
    Players beyond the count are dropped from the tail, missing seats are
    filled with factory defaults. Returns the resulting count.
    """
    n = coerce_int(count)
    if n is None:
        n = MIN_PLAYERS
    n = clamp(n, MIN_PLAYERS, MAX_PLAYERS)

    if factory is None:
        factory = PlayerFactory()

    before = session.num_players
    if before > n:
        dropped = session.players[n:]
        del session.players[n:]
        logger.info(
            "Roster truncated to %d, dropped %s",
            n, ", ".join(p.name for p in dropped),
        )
    while session.num_players < n:
        session.players.append(factory.create(session, session.num_players))
    if session.num_players > before:
        logger.info("Roster grown from %d to %d", before, n)

    return n


def set_starting_life(session: Session, value: Any, fallback: int = DEFAULT_STARTING_LIFE) -> int:
    """
    Store the starting life used by future resets and new players.

    Non-numeric input falls back to `fallback`; anything below 1 is
    raised to 1. Existing life totals are left alone.
    """
    life = coerce_int(value)
    if life is None:
        life = fallback
    session.starting_life = clamp(life, low=1)
    logger.debug("Starting life set to %d", session.starting_life)
    return session.starting_life
