"""
Pydantic models of the persisted session blob.

The blob uses camelCase keys:

    {
      "startingLife": 40,
      "players": [
        {"id": "...", "name": "Player 1", "life": 40, "poison": 0,
         "commanderDamage": {"<sourceId>": 7}, "color": "#ef476f"}
      ]
    }

Anything that violates the bounds below fails validation, and the store
treats the blob as absent. Player ids must be JSON strings; a numeric id
fails validation like any other type mismatch.
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

from ..engine_core.state import Player, Session, LIFE_FLOOR, MAX_PLAYERS, DEFAULT_COLORS


class PersistedPlayer(BaseModel):
    """One player record in the blob."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    name: str
    life: int = Field(ge=LIFE_FLOOR)
    poison: int = Field(default=0, ge=0)
    commander_damage: dict[str, PositiveInt] = Field(default_factory=dict, alias="commanderDamage")
    color: str = DEFAULT_COLORS[0].hex

    @classmethod
    def from_player(cls, player: Player) -> PersistedPlayer:
        return cls(
            id=player.player_id,
            name=player.name,
            life=player.life,
            poison=player.poison,
            commander_damage=dict(player.commander_damage),
            color=player.color,
        )

    def to_player(self) -> Player:
        return Player(
            player_id=self.id,
            name=self.name,
            life=self.life,
            poison=self.poison,
            commander_damage=dict(self.commander_damage),
            color=self.color,
        )


class PersistedSession(BaseModel):
    """The whole session blob."""
    model_config = ConfigDict(populate_by_name=True)

    starting_life: int = Field(ge=1, alias="startingLife")
    players: list[PersistedPlayer] = Field(default_factory=list, max_length=MAX_PLAYERS)

    @model_validator(mode="after")
    def check_unique_ids(self) -> PersistedSession:
        ids = [p.id for p in self.players]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate player ids")
        return self

    @classmethod
    def from_session(cls, session: Session) -> PersistedSession:
        return cls(
            starting_life=session.starting_life,
            players=[PersistedPlayer.from_player(p) for p in session.players],
        )

    def to_session(self) -> Session:
        return Session(
            starting_life=self.starting_life,
            players=[p.to_player() for p in self.players],
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
