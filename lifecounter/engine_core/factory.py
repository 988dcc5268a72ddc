"""
Player Factory - Builds default player records for a seat position.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable
import uuid

from .state import Player, Session, default_color


def _uuid_hex() -> str:
    return uuid.uuid4().hex


@dataclass
class PlayerFactory:
    """
    Creates players with fresh ids.

    The id generator is injectable so tests can use predictable ids.
    Ids already present in the session are never handed out again.
    """
    id_factory: Callable[[], str] = field(default=_uuid_hex)

    def new_id(self, taken: set[str]) -> str:
        player_id = str(self.id_factory())
        while player_id in taken:
            player_id = str(self.id_factory())
        return player_id

    def create(self, session: Session, position: int) -> Player:
        """Create the default player for a 0-based seat position."""
        return Player(
            player_id=self.new_id(set(session.player_ids)),
            name=f"Player {position + 1}",
            life=session.starting_life,
            poison=0,
            commander_damage={},
            color=default_color(position),
        )
