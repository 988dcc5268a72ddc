"""
Board Service - Read side for whatever draws the board.

The service:
1. Forwards user intents to the controller
2. Re-reads the session after every call
3. Builds view models for only the players that changed

This layer is framework-agnostic; a UI calls it and renders the views.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.death import is_dead, lethal_sources
from ..engine_core.intent import Intent
from ..engine_core.state import Player, Session, DEFAULT_COLORS
from ..session import SessionController
from .schemas import (
    BoardView,
    CommanderDamageRow,
    IntentResponse,
    PaletteEntry,
    PlayerView,
)


@dataclass
class BoardService:
    """
    Presentation-facing service.

    Usage:
        service = BoardService(SessionController.open())

        board = service.board()
        response = service.apply(Intent.change_life(player_id, -5))
        for view in response.players:
            redraw(view)
    """
    controller: SessionController

    def board(self) -> BoardView:
        session = self.controller.snapshot()
        return BoardView(
            starting_life=session.starting_life,
            player_count=session.num_players,
            players=[self._player_view(session, p) for p in session.players],
        )

    def player(self, player_id: str) -> PlayerView | None:
        session = self.controller.snapshot()
        player = session.get_player(player_id)
        if player is None:
            return None
        return self._player_view(session, player)

    def palette(self) -> list[PaletteEntry]:
        return [PaletteEntry(name=c.name, hex=c.hex) for c in DEFAULT_COLORS]

    def apply(self, intent: Intent) -> IntentResponse:
        """Forward an intent and return the views that need redrawing."""
        result = self.controller.dispatch(intent)
        session = self.controller.snapshot()

        views = []
        for player_id in result.touched_player_ids:
            player = session.get_player(player_id)
            if player is not None:
                views.append(self._player_view(session, player))

        return IntentResponse(
            applied=result.applied,
            full_redraw=result.full_redraw,
            players=views,
            starting_life=session.starting_life,
            error=result.error,
        )

    def _player_view(self, session: Session, player: Player) -> PlayerView:
        lethal = set(lethal_sources(player))
        rows = [
            CommanderDamageRow(
                source_id=opponent.player_id,
                source_name=opponent.name,
                amount=player.damage_from(opponent.player_id),
                lethal=opponent.player_id in lethal,
            )
            for opponent in session.opponents_of(player.player_id)
        ]
        return PlayerView(
            player_id=player.player_id,
            name=player.name,
            life=player.life,
            poison=player.poison,
            color=player.color,
            is_dead=is_dead(player),
            commander_damage=rows,
        )
