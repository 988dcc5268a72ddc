"""
Pydantic view models for the presentation layer.

These are read-only pictures of the session, rebuilt after every call.
Death is computed here from the engine predicate, never stored.
"""

from typing import Optional
from pydantic import BaseModel, Field


class PaletteEntry(BaseModel):
    """One selectable accent color."""
    name: str
    hex: str


class CommanderDamageRow(BaseModel):
    """Damage a player has taken from one opponent's commander."""
    source_id: str
    source_name: str
    amount: int = 0
    lethal: bool = False


class PlayerView(BaseModel):
    """Everything needed to draw one player card."""
    player_id: str
    name: str
    life: int
    poison: int = 0
    color: str
    is_dead: bool = False
    commander_damage: list[CommanderDamageRow] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class BoardView(BaseModel):
    """The whole board."""
    starting_life: int
    player_count: int
    players: list[PlayerView] = Field(default_factory=list)


class IntentResponse(BaseModel):
    """Result of forwarding an intent, with the views to redraw."""
    applied: bool
    full_redraw: bool = False
    players: list[PlayerView] = Field(default_factory=list)
    starting_life: Optional[int] = None
    error: Optional[str] = None
