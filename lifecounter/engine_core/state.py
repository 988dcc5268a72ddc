"""
Session State - Players and the session that owns them.

Design principles:
- One explicit Session value, owned by a controller and passed to every
  engine operation (no module-level state)
- Mutated in place by the engine; readers take a clone
- Serializable: the storage layer maps it to a single JSON blob
"""

from __future__ import annotations
from dataclasses import dataclass, field
from copy import deepcopy


MIN_PLAYERS = 1
MAX_PLAYERS = 6

LIFE_FLOOR = -999
COMMANDER_LETHAL = 21

DEFAULT_STARTING_LIFE = 40
DEFAULT_PLAYER_COUNT = 4


@dataclass(frozen=True)
class PaletteColor:
    """A named accent color offered to players."""
    name: str
    hex: str


DEFAULT_COLORS: tuple[PaletteColor, ...] = (
    PaletteColor("Red", "#ef476f"),
    PaletteColor("Yellow", "#ffd166"),
    PaletteColor("Green", "#06d6a0"),
    PaletteColor("Blue", "#118ab2"),
    PaletteColor("Purple", "#f72585"),
    PaletteColor("Orange", "#ff8c42"),
    PaletteColor("Pink", "#ff6b9d"),
    PaletteColor("Cyan", "#00d4ff"),
    PaletteColor("Lime", "#7fff00"),
    PaletteColor("Teal", "#20b2aa"),
    PaletteColor("Indigo", "#4b0082"),
    PaletteColor("Brown", "#8b4513"),
)


def default_color(position: int) -> str:
    """Palette hex for a seat position."""
    return DEFAULT_COLORS[position % len(DEFAULT_COLORS)].hex


@dataclass
class Player:
    """
    State for a single player.

    commander_damage maps a source player's id to the damage taken from
    that source. Only positive values are ever stored. A source id may
    outlive its player; it then simply reads as any other entry.
    """
    player_id: str
    name: str
    life: int
    poison: int = 0
    commander_damage: dict[str, int] = field(default_factory=dict)
    color: str = DEFAULT_COLORS[0].hex

    def damage_from(self, source_id: str) -> int:
        """Commander damage taken from a source, 0 if none."""
        return self.commander_damage.get(source_id, 0)


@dataclass
class Session:
    """
    Complete tracker state.

    This is the canonical state that the engine operates on.
    """
    starting_life: int = DEFAULT_STARTING_LIFE
    players: list[Player] = field(default_factory=list)

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def player_ids(self) -> list[str]:
        return [p.player_id for p in self.players]

    def get_player(self, player_id: str) -> Player | None:
        """Get player by ID."""
        for p in self.players:
            if p.player_id == player_id:
                return p
        return None

    def opponents_of(self, player_id: str) -> list[Player]:
        """Every current player except the given one, in seat order."""
        return [p for p in self.players if p.player_id != player_id]

    def clone(self) -> Session:
        """Deep copy the state."""
        return deepcopy(self)
