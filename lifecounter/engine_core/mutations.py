"""
Mutations - Every state-changing operation on a player.

All operations:
- Look the target up by id; an unknown id is a silent no-op
- Coerce numeric input; unusable input makes the call a no-op
- Return the touched Player, or None when nothing happened

Commander damage and life always move together inside one call, so the
two can never drift apart. Life never drops below LIFE_FLOOR, poison
never below 0, and a commander damage entry that would reach 0 is
deleted instead of stored.
"""

from __future__ import annotations
from typing import Any
import logging

from .coerce import coerce_int, clamp
from .state import Player, Session, LIFE_FLOOR

logger = logging.getLogger(__name__)


def _floor_life(player: Player) -> None:
    player.life = clamp(player.life, low=LIFE_FLOOR)


def change_life(session: Session, player_id: str, delta: Any) -> Player | None:
    """Add delta to a player's life."""
    player = session.get_player(player_id)
    amount = coerce_int(delta)
    if player is None or amount is None:
        return None
    player.life += amount
    _floor_life(player)
    logger.debug("%s life %+d -> %d", player.name, amount, player.life)
    return player


def change_poison(session: Session, player_id: str, delta: Any) -> Player | None:
    """Add delta to a player's poison counter, never below 0."""
    player = session.get_player(player_id)
    amount = coerce_int(delta)
    if player is None or amount is None:
        return None
    player.poison = max(0, player.poison + amount)
    logger.debug("%s poison %+d -> %d", player.name, amount, player.poison)
    return player


def apply_commander_damage(
    session: Session,
    target_id: str,
    source_id: str,
    amount: Any,
) -> Player | None:
    """
    Deal commander damage from source to target.

    The entry grows by amount and life drops by the same amount.
    Amounts that aren't positive integers are ignored, as is a player
    damaging themselves.
    """
    player = session.get_player(target_id)
    damage = coerce_int(amount)
    if player is None or not source_id or source_id == target_id:
        return None
    if damage is None or damage <= 0:
        return None

    player.commander_damage[source_id] = player.damage_from(source_id) + damage
    player.life -= damage
    _floor_life(player)
    logger.debug(
        "%s took %d commander damage from %s (now %d)",
        player.name, damage, source_id, player.commander_damage[source_id],
    )
    return player


def decrement_commander_damage(session: Session, target_id: str, source_id: str) -> Player | None:
    """Remove one point of commander damage and give back one life."""
    player = session.get_player(target_id)
    if player is None:
        return None
    current = player.damage_from(source_id)
    if current <= 0:
        return None

    remaining = current - 1
    if remaining <= 0:
        del player.commander_damage[source_id]
    else:
        player.commander_damage[source_id] = remaining
    player.life += 1
    _floor_life(player)
    return player


def clear_commander_damage(session: Session, target_id: str, source_id: str) -> Player | None:
    """Remove all commander damage from one source and give the life back."""
    player = session.get_player(target_id)
    if player is None:
        return None
    current = player.damage_from(source_id)
    if current <= 0:
        return None

    player.life += current
    del player.commander_damage[source_id]
    _floor_life(player)
    return player


def set_commander_damage_exact(
    session: Session,
    target_id: str,
    source_id: str,
    new_value: Any,
) -> Player | None:
    """
    Overwrite the commander damage from one source.

    Life moves by the difference: raising the value costs life, lowering
    it gives life back. Non-numeric input reads as 0, which clears the
    entry.
    """
    player = session.get_player(target_id)
    if player is None or not source_id or source_id == target_id:
        return None

    value = coerce_int(new_value)
    value = max(0, value if value is not None else 0)
    delta = value - player.damage_from(source_id)

    if value <= 0:
        player.commander_damage.pop(source_id, None)
    else:
        player.commander_damage[source_id] = value
    player.life -= delta
    _floor_life(player)
    return player


def reset_player(session: Session, player_id: str) -> Player | None:
    """Restore starting life and clear poison and commander damage."""
    player = session.get_player(player_id)
    if player is None:
        return None
    player.life = session.starting_life
    player.poison = 0
    player.commander_damage = {}
    return player


def reset_all(session: Session) -> list[Player]:
    """Reset every player."""
    for player in session.players:
        reset_player(session, player.player_id)
    logger.info("All %d players reset to %d life", session.num_players, session.starting_life)
    return list(session.players)


def rename_player(session: Session, player_id: str, name: Any) -> Player | None:
    """Change a player's display name."""
    player = session.get_player(player_id)
    if player is None:
        return None
    player.name = "" if name is None else str(name)
    return player


def set_color(session: Session, player_id: str, color: Any) -> Player | None:
    """Change a player's accent color."""
    player = session.get_player(player_id)
    if player is None or not color:
        return None
    player.color = str(color)
    return player
