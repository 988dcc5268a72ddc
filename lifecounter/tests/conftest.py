"""
Pytest fixtures for Lifecounter tests.
"""

import itertools

import pytest

from ..config import Settings
from ..engine_core.factory import PlayerFactory
from ..engine_core.roster import ensure_count
from ..engine_core.state import Session
from ..session import SessionController
from ..storage import SessionStore


@pytest.fixture
def factory() -> PlayerFactory:
    """Factory handing out p1, p2, p3, ..."""
    counter = itertools.count(1)
    return PlayerFactory(id_factory=lambda: f"p{next(counter)}")


@pytest.fixture
def two_player_session(factory: PlayerFactory) -> Session:
    """A 40-life session with players p1 and p2."""
    session = Session(starting_life=40)
    ensure_count(session, 2, factory)
    return session


@pytest.fixture
def store(tmp_path) -> SessionStore:
    """A store writing into the test's temp dir."""
    return SessionStore(state_dir=tmp_path / "state")


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(state_dir=tmp_path / "state", starting_life=40, player_count=4)


@pytest.fixture
def controller(store: SessionStore, settings: Settings, factory: PlayerFactory) -> SessionController:
    """A controller over a fresh 4-player session."""
    return SessionController.open(store=store, settings=settings, factory=factory)
