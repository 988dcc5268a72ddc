"""
Tests for session persistence.

Tests:
- save then load gives back an equal session
- Blob layout uses the camelCase keys
- Missing, corrupt and out-of-bounds blobs load as absent
- A failed write does not raise
"""

import json

import pytest

from ..engine_core.mutations import apply_commander_damage, change_poison, rename_player
from ..engine_core.state import Session, Player
from ..storage import SessionStore, STORAGE_KEY


def _write_blob(store: SessionStore, text: str):
    store.state_dir.mkdir(parents=True, exist_ok=True)
    store.path.write_text(text, encoding="utf-8")


def _valid_blob(**overrides) -> dict:
    blob = {
        "startingLife": 40,
        "players": [
            {"id": "a", "name": "A", "life": 33, "poison": 1,
             "commanderDamage": {"b": 7}, "color": "#ef476f"},
            {"id": "b", "name": "B", "life": 40, "poison": 0,
             "commanderDamage": {}, "color": "#ffd166"},
        ],
    }
    blob.update(overrides)
    return blob


class TestRoundTrip:
    """Tests for save/load."""

    def test_save_then_load_is_equal(self, store, two_player_session):
        session = two_player_session
        rename_player(session, "p1", "Edgar")
        change_poison(session, "p2", 3)
        apply_commander_damage(session, "p1", "p2", 11)
        apply_commander_damage(session, "p2", "departed", 2)

        assert store.save(session)
        assert store.load() == session

    def test_file_uses_storage_key(self, store, two_player_session):
        store.save(two_player_session)
        assert store.path.name == f"{STORAGE_KEY}.json"
        assert store.path.exists()

    def test_blob_layout(self, store, two_player_session):
        apply_commander_damage(two_player_session, "p1", "p2", 4)
        store.save(two_player_session)

        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert data["startingLife"] == 40
        first = data["players"][0]
        assert set(first) == {"id", "name", "life", "poison", "commanderDamage", "color"}
        assert first["commanderDamage"] == {"p2": 4}

    def test_save_overwrites(self, store, two_player_session):
        store.save(two_player_session)
        two_player_session.starting_life = 20
        store.save(two_player_session)
        assert store.load().starting_life == 20

    def test_load_valid_blob(self, store):
        _write_blob(store, json.dumps(_valid_blob()))
        session = store.load()
        assert session.player_ids == ["a", "b"]
        assert session.get_player("a").commander_damage == {"b": 7}

    def test_clear(self, store, two_player_session):
        store.save(two_player_session)
        store.clear()
        assert store.load() is None


class TestInvalidBlobs:
    """Anything unusable loads as None."""

    def test_missing(self, store):
        assert store.load() is None

    @pytest.mark.parametrize("text", [
        "{not json",
        "",
        "null",
        "[]",
        '{"players": []}',
    ])
    def test_unparsable_or_wrong_shape(self, store, text):
        _write_blob(store, text)
        assert store.load() is None

    @pytest.mark.parametrize("blob", [
        _valid_blob(startingLife=0),
        _valid_blob(players=[{"id": "a", "name": "A", "life": -1000, "poison": 0,
                              "commanderDamage": {}, "color": "#fff"}]),
        _valid_blob(players=[{"id": "a", "name": "A", "life": 10, "poison": -1,
                              "commanderDamage": {}, "color": "#fff"}]),
        _valid_blob(players=[{"id": "a", "name": "A", "life": 10, "poison": 0,
                              "commanderDamage": {"b": 0}, "color": "#fff"}]),
        _valid_blob(players=[{"id": "a", "name": "A", "life": 10, "poison": 0,
                              "commanderDamage": {}, "color": "#fff"}] * 2),
        _valid_blob(players=[{"id": f"x{i}", "name": "X", "life": 10, "poison": 0,
                              "commanderDamage": {}, "color": "#fff"} for i in range(7)]),
        _valid_blob(players=[{"id": 1700000000000.5, "name": "A", "life": 10, "poison": 0,
                              "commanderDamage": {}, "color": "#fff"}]),
    ], ids=["starting-life", "life-floor", "poison", "zero-damage", "duplicate-ids", "too-many", "numeric-id"])
    def test_out_of_bounds(self, store, blob):
        _write_blob(store, json.dumps(blob))
        assert store.load() is None


class TestSaveFailure:
    """A failed write is reported, not raised."""

    def test_unwritable_dir(self, tmp_path, two_player_session):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = SessionStore(state_dir=blocker / "state")
        assert store.save(two_player_session) is False

    def test_invalid_session_not_written(self, store):
        session = Session(starting_life=40, players=[
            Player(player_id="a", name="A", life=10, commander_damage={"b": 0}),
        ])
        assert store.save(session) is False
        assert not store.path.exists()

    def test_unencodable_name_does_not_raise(self, controller, store):
        """A lone surrogate in a name keeps the rename in memory only."""
        before = store.path.read_text(encoding="utf-8")
        assert controller.rename_player("p1", "bad\ud800name")
        assert controller.get_player("p1").name == "bad\ud800name"
        assert store.path.read_text(encoding="utf-8") == before

    def test_unencodable_session_reports_false(self, store, two_player_session):
        two_player_session.players[0].name = "\ud800"
        assert store.save(two_player_session) is False
        assert not store.path.exists()
