"""
Intents - User requests forwarded by the presentation layer.

An Intent names one engine operation and its arguments. apply_intent()
dispatches it against a Session and reports which players need a
redraw. Nothing here raises on bad input: an intent that can't be
applied comes back as a failed IntentResult.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from . import mutations, roster
from .factory import PlayerFactory
from .state import Session, DEFAULT_STARTING_LIFE


class IntentType(Enum):
    """Operations a user can ask for."""
    # Roster
    SET_PLAYER_COUNT = "set_player_count"
    SET_STARTING_LIFE = "set_starting_life"

    # Counters
    CHANGE_LIFE = "change_life"
    CHANGE_POISON = "change_poison"

    # Commander damage
    COMMANDER_DAMAGE = "commander_damage"
    DECREMENT_COMMANDER_DAMAGE = "decrement_commander_damage"
    CLEAR_COMMANDER_DAMAGE = "clear_commander_damage"
    SET_COMMANDER_DAMAGE = "set_commander_damage"

    # Resets
    RESET_PLAYER = "reset_player"
    RESET_ALL = "reset_all"

    # Cosmetic
    RENAME_PLAYER = "rename_player"
    SET_COLOR = "set_color"


@dataclass
class Intent:
    """
    A single request against the session.

    player_id is the player being changed; source_id is the commander
    dealing damage for the commander damage intents.
    """
    intent_type: IntentType
    player_id: str | None = None
    source_id: str | None = None
    value: Any = None

    @classmethod
    def set_player_count(cls, count: Any) -> Intent:
        return cls(IntentType.SET_PLAYER_COUNT, value=count)

    @classmethod
    def set_starting_life(cls, life: Any) -> Intent:
        return cls(IntentType.SET_STARTING_LIFE, value=life)

    @classmethod
    def change_life(cls, player_id: str, delta: Any) -> Intent:
        return cls(IntentType.CHANGE_LIFE, player_id=player_id, value=delta)

    @classmethod
    def change_poison(cls, player_id: str, delta: Any) -> Intent:
        return cls(IntentType.CHANGE_POISON, player_id=player_id, value=delta)

    @classmethod
    def commander_damage(cls, target_id: str, source_id: str, amount: Any) -> Intent:
        return cls(IntentType.COMMANDER_DAMAGE, player_id=target_id, source_id=source_id, value=amount)

    @classmethod
    def decrement_commander_damage(cls, target_id: str, source_id: str) -> Intent:
        return cls(IntentType.DECREMENT_COMMANDER_DAMAGE, player_id=target_id, source_id=source_id)

    @classmethod
    def clear_commander_damage(cls, target_id: str, source_id: str) -> Intent:
        return cls(IntentType.CLEAR_COMMANDER_DAMAGE, player_id=target_id, source_id=source_id)

    @classmethod
    def set_commander_damage(cls, target_id: str, source_id: str, value: Any) -> Intent:
        return cls(IntentType.SET_COMMANDER_DAMAGE, player_id=target_id, source_id=source_id, value=value)

    @classmethod
    def reset_player(cls, player_id: str) -> Intent:
        return cls(IntentType.RESET_PLAYER, player_id=player_id)

    @classmethod
    def reset_all(cls) -> Intent:
        return cls(IntentType.RESET_ALL)

    @classmethod
    def rename_player(cls, player_id: str, name: Any) -> Intent:
        return cls(IntentType.RENAME_PLAYER, player_id=player_id, value=name)

    @classmethod
    def set_color(cls, player_id: str, color: Any) -> Intent:
        return cls(IntentType.SET_COLOR, player_id=player_id, value=color)


@dataclass
class IntentResult:
    """
    Outcome of applying an intent.

    applied is False for no-ops (unknown player, unusable value).
    full_redraw is set when the roster or every player changed, in which
    case touched_player_ids lists every current player.
    """
    applied: bool
    touched_player_ids: list[str] = field(default_factory=list)
    full_redraw: bool = False
    error: str | None = None

    @classmethod
    def noop(cls, error: str | None = None) -> IntentResult:
        return cls(applied=False, error=error)

    @classmethod
    def board(cls, session: Session) -> IntentResult:
        return cls(applied=True, touched_player_ids=session.player_ids, full_redraw=True)


@dataclass
class IntentDispatcher:
    """
    Routes intents to engine operations.

    Stateless apart from the factory used when the roster grows and the
    fallback starting life for unreadable input.
    """
    factory: PlayerFactory = field(default_factory=PlayerFactory)
    fallback_starting_life: int = DEFAULT_STARTING_LIFE

    def apply(self, session: Session, intent: Intent) -> IntentResult:
        handler = self._get_handler(intent.intent_type)
        if handler is None:
            return IntentResult.noop(f"No handler for intent type: {intent.intent_type}")
        return handler(session, intent)

    def _get_handler(self, intent_type: IntentType) -> Callable[[Session, Intent], IntentResult] | None:
        handlers = {
            IntentType.SET_PLAYER_COUNT: self._handle_player_count,
            IntentType.SET_STARTING_LIFE: self._handle_starting_life,
            IntentType.CHANGE_LIFE: self._player_op(mutations.change_life, with_value=True),
            IntentType.CHANGE_POISON: self._player_op(mutations.change_poison, with_value=True),
            IntentType.COMMANDER_DAMAGE: self._commander_op(mutations.apply_commander_damage, with_value=True),
            IntentType.DECREMENT_COMMANDER_DAMAGE: self._commander_op(mutations.decrement_commander_damage),
            IntentType.CLEAR_COMMANDER_DAMAGE: self._commander_op(mutations.clear_commander_damage),
            IntentType.SET_COMMANDER_DAMAGE: self._commander_op(mutations.set_commander_damage_exact, with_value=True),
            IntentType.RESET_PLAYER: self._player_op(mutations.reset_player),
            IntentType.RESET_ALL: self._handle_reset_all,
            IntentType.RENAME_PLAYER: self._player_op(mutations.rename_player, with_value=True),
            IntentType.SET_COLOR: self._player_op(mutations.set_color, with_value=True),
        }
        return handlers.get(intent_type)

    def _handle_player_count(self, session: Session, intent: Intent) -> IntentResult:
        roster.ensure_count(session, intent.value, self.factory)
        return IntentResult.board(session)

    def _handle_starting_life(self, session: Session, intent: Intent) -> IntentResult:
        roster.set_starting_life(session, intent.value, self.fallback_starting_life)
        # Nothing on screen changes; only future resets and new seats.
        return IntentResult(applied=True)

    def _handle_reset_all(self, session: Session, intent: Intent) -> IntentResult:
        mutations.reset_all(session)
        return IntentResult.board(session)

    @staticmethod
    def _player_op(op, with_value: bool = False):
        def handle(session: Session, intent: Intent) -> IntentResult:
            args = (intent.value,) if with_value else ()
            player = op(session, intent.player_id, *args)
            if player is None:
                return IntentResult.noop()
            return IntentResult(applied=True, touched_player_ids=[player.player_id])
        return handle

    @staticmethod
    def _commander_op(op, with_value: bool = False):
        def handle(session: Session, intent: Intent) -> IntentResult:
            args = (intent.value,) if with_value else ()
            player = op(session, intent.player_id, intent.source_id, *args)
            if player is None:
                return IntentResult.noop()
            return IntentResult(applied=True, touched_player_ids=[player.player_id])
        return handle


def apply_intent(session: Session, intent: Intent, factory: PlayerFactory | None = None) -> IntentResult:
    """Convenience function to apply one intent."""
    dispatcher = IntentDispatcher(factory=factory) if factory is not None else IntentDispatcher()
    return dispatcher.apply(session, intent)
