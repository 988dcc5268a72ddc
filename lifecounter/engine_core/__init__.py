"""
Engine Core - Player state and the rules that change it.

The engine:
1. Holds a Session of 1-6 Players
2. Creates players through the PlayerFactory
3. Grows and shrinks the roster
4. Applies mutations (life, poison, commander damage, resets)
5. Evaluates whether a player is dead

The engine knows nothing about storage or rendering.
"""

from .state import (
    Session,
    Player,
    PaletteColor,
    DEFAULT_COLORS,
    MIN_PLAYERS,
    MAX_PLAYERS,
    LIFE_FLOOR,
    COMMANDER_LETHAL,
    DEFAULT_STARTING_LIFE,
    DEFAULT_PLAYER_COUNT,
)
from .factory import PlayerFactory
from .roster import ensure_count, set_starting_life
from .mutations import (
    change_life,
    change_poison,
    apply_commander_damage,
    decrement_commander_damage,
    clear_commander_damage,
    set_commander_damage_exact,
    reset_player,
    reset_all,
    rename_player,
    set_color,
)
from .death import is_dead, lethal_sources
from .intent import Intent, IntentType, IntentResult, IntentDispatcher, apply_intent

__all__ = [
    "Session",
    "Player",
    "PaletteColor",
    "DEFAULT_COLORS",
    "MIN_PLAYERS",
    "MAX_PLAYERS",
    "LIFE_FLOOR",
    "COMMANDER_LETHAL",
    "DEFAULT_STARTING_LIFE",
    "DEFAULT_PLAYER_COUNT",
    "PlayerFactory",
    "ensure_count",
    "set_starting_life",
    "change_life",
    "change_poison",
    "apply_commander_damage",
    "decrement_commander_damage",
    "clear_commander_damage",
    "set_commander_damage_exact",
    "reset_player",
    "reset_all",
    "rename_player",
    "set_color",
    "is_dead",
    "lethal_sources",
    "Intent",
    "IntentType",
    "IntentResult",
    "IntentDispatcher",
    "apply_intent",
]
