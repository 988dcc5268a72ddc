"""
Session Controller - Owns the live session.

LIFECYCLE:
1. open() loads the saved session, or builds a default one if there is
   none or it can't be read
2. A session with no players is grown to the configured player count
3. Every operation mutates the session and saves it before returning
4. Readers pull a snapshot after each call; nothing is pushed

All mutations go through one lock, so a commander damage change and the
life change that comes with it are always written and seen together.
"""

from __future__ import annotations
from copy import deepcopy
from typing import Any
import logging
import threading

from ..config import Settings, load_settings
from ..engine_core import mutations, roster
from ..engine_core.factory import PlayerFactory
from ..engine_core.intent import Intent, IntentDispatcher, IntentResult
from ..engine_core.state import Player, Session
from ..storage import SessionStore

logger = logging.getLogger(__name__)


class SessionController:
    """
    Single point of mutation for a session.

    Usage:
        controller = SessionController.open()
        controller.apply_commander_damage(target_id, source_id, 7)
        board = controller.snapshot()
    """

    def __init__(
        self,
        session: Session,
        store: SessionStore,
        settings: Settings,
        factory: PlayerFactory | None = None,
    ):
        self._session = session
        self.store = store
        self.settings = settings
        self.factory = factory or PlayerFactory()
        self.dispatcher = IntentDispatcher(
            factory=self.factory,
            fallback_starting_life=settings.starting_life,
        )
        self._lock = threading.RLock()

    @classmethod
    def open(
        cls,
        store: SessionStore | None = None,
        settings: Settings | None = None,
        factory: PlayerFactory | None = None,
    ) -> SessionController:
        """
        Create a controller from the saved session, or from defaults.

        Args:
            store: Where the session lives (defaults to settings.state_dir)
            settings: Defaults for a fresh session (read from env if omitted)
            factory: Player factory, injectable for predictable ids
        """
        settings = settings or load_settings()
        store = store or SessionStore(state_dir=settings.state_dir)

        session = store.load()
        if session is None:
            session = Session(starting_life=settings.starting_life)
            logger.info("Starting a fresh session at %d life", settings.starting_life)

        controller = cls(session, store, settings, factory)
        if not session.players:
            controller.ensure_count(settings.player_count)
        return controller

    # =========================================================================
    # Reads
    # =========================================================================

    def snapshot(self) -> Session:
        """Deep copy of the current session."""
        with self._lock:
            return self._session.clone()

    def get_player(self, player_id: str) -> Player | None:
        """Copy of one player, or None."""
        with self._lock:
            player = self._session.get_player(player_id)
            return deepcopy(player) if player is not None else None

    # =========================================================================
    # Roster
    # =========================================================================

    def ensure_count(self, count: Any) -> int:
        with self._lock:
            n = roster.ensure_count(self._session, count, self.factory)
            self._save()
            return n

    def set_starting_life(self, life: Any) -> int:
        with self._lock:
            value = roster.set_starting_life(self._session, life, self.settings.starting_life)
            self._save()
            return value

    # =========================================================================
    # Mutations
    # =========================================================================

    def change_life(self, player_id: str, delta: Any) -> bool:
        return self._mutate(mutations.change_life, player_id, delta)

    def change_poison(self, player_id: str, delta: Any) -> bool:
        return self._mutate(mutations.change_poison, player_id, delta)

    def apply_commander_damage(self, target_id: str, source_id: str, amount: Any) -> bool:
        return self._mutate(mutations.apply_commander_damage, target_id, source_id, amount)

    def decrement_commander_damage(self, target_id: str, source_id: str) -> bool:
        return self._mutate(mutations.decrement_commander_damage, target_id, source_id)

    def clear_commander_damage(self, target_id: str, source_id: str) -> bool:
        return self._mutate(mutations.clear_commander_damage, target_id, source_id)

    def set_commander_damage_exact(self, target_id: str, source_id: str, value: Any) -> bool:
        return self._mutate(mutations.set_commander_damage_exact, target_id, source_id, value)

    def reset_player(self, player_id: str) -> bool:
        return self._mutate(mutations.reset_player, player_id)

    def reset_all(self):
        with self._lock:
            mutations.reset_all(self._session)
            self._save()

    def rename_player(self, player_id: str, name: Any) -> bool:
        return self._mutate(mutations.rename_player, player_id, name)

    def set_color(self, player_id: str, color: Any) -> bool:
        return self._mutate(mutations.set_color, player_id, color)

    def dispatch(self, intent: Intent) -> IntentResult:
        """Apply an intent and save if it changed anything."""
        with self._lock:
            result = self.dispatcher.apply(self._session, intent)
            if result.applied:
                self._save()
            return result

    # =========================================================================
    # Internals
    # =========================================================================

    def _mutate(self, op, *args) -> bool:
        with self._lock:
            player = op(self._session, *args)
            if player is None:
                return False
            self._save()
            return True

    def _save(self):
        if not self.store.save(self._session):
            logger.warning("Session change kept in memory only")
