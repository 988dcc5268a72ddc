"""
Death Evaluator - Is a player out of the game?

A player is dead at 0 life or less, or once any single commander has
dealt them 21 damage. Poison is tracked but not part of the check.
"""

from __future__ import annotations

from .state import Player, COMMANDER_LETHAL


def is_dead(player: Player) -> bool:
    if player.life <= 0:
        return True
    return any(v >= COMMANDER_LETHAL for v in player.commander_damage.values())


def lethal_sources(player: Player) -> list[str]:
    """Source ids whose commander damage alone is lethal."""
    return [
        source_id for source_id, damage in player.commander_damage.items()
        if damage >= COMMANDER_LETHAL
    ]
