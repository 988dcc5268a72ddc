"""
Tests for intent dispatch against a bare session.
"""

from ..engine_core.intent import Intent, IntentType, IntentDispatcher, IntentResult, apply_intent


class TestIntentDispatch:
    """Each intent reaches its engine operation."""

    def test_change_life(self, two_player_session):
        result = apply_intent(two_player_session, Intent.change_life("p1", -4))
        assert result.applied
        assert result.touched_player_ids == ["p1"]
        assert two_player_session.get_player("p1").life == 36

    def test_commander_damage_sequence(self, two_player_session):
        session = two_player_session
        apply_intent(session, Intent.commander_damage("p2", "p1", 10))
        apply_intent(session, Intent.set_commander_damage("p2", "p1", 5))
        apply_intent(session, Intent.decrement_commander_damage("p2", "p1"))
        player = session.get_player("p2")
        assert player.commander_damage == {"p1": 4}
        assert player.life == 36

        apply_intent(session, Intent.clear_commander_damage("p2", "p1"))
        assert player.commander_damage == {}
        assert player.life == 40

    def test_rename_and_color(self, two_player_session):
        apply_intent(two_player_session, Intent.rename_player("p1", "Tymna"))
        apply_intent(two_player_session, Intent.set_color("p1", "#20b2aa"))
        player = two_player_session.get_player("p1")
        assert (player.name, player.color) == ("Tymna", "#20b2aa")

    def test_reset_all_is_full_redraw(self, two_player_session):
        apply_intent(two_player_session, Intent.change_poison("p2", 3))
        result = apply_intent(two_player_session, Intent.reset_all())
        assert result.full_redraw
        assert result.touched_player_ids == ["p1", "p2"]
        assert two_player_session.get_player("p2").poison == 0

    def test_player_count_uses_factory(self, two_player_session, factory):
        # factory fixture already handed out p1 and p2 via the session fixture
        result = apply_intent(two_player_session, Intent.set_player_count(3), factory)
        assert result.touched_player_ids == ["p1", "p2", "p3"]

    def test_starting_life_touches_nobody(self, two_player_session):
        result = apply_intent(two_player_session, Intent.set_starting_life(20))
        assert result.applied
        assert result.touched_player_ids == []
        assert two_player_session.starting_life == 20

    def test_starting_life_fallback(self, two_player_session):
        dispatcher = IntentDispatcher(fallback_starting_life=30)
        dispatcher.apply(two_player_session, Intent.set_starting_life("?"))
        assert two_player_session.starting_life == 30

    def test_unknown_player_is_noop(self, two_player_session):
        result = apply_intent(two_player_session, Intent.reset_player("ghost"))
        assert result == IntentResult.noop()

    def test_intent_type_values(self):
        assert Intent.change_poison("p1", 1).intent_type is IntentType.CHANGE_POISON
        assert Intent.commander_damage("p1", "p2", 1).source_id == "p2"
