"""Shared fixtures for engine, service and API tests."""

import pytest

from frontline.config import GameConfig, Settings
from frontline.database import init_db, make_engine, make_session_factory
from frontline.engine import MemoryEventSink, create_player_round, create_round, open_round, stake
from frontline.services import GameService


@pytest.fixture
def events() -> MemoryEventSink:
    return MemoryEventSink()


@pytest.fixture
def open_rnd():
    """A round on its first open cycle."""
    rnd = create_round()
    open_round(rnd)
    return rnd


@pytest.fixture
def place():
    """Stake helper: place(rnd, player, a, b, c) -> PlayerRound."""

    def _place(rnd, player, a=0, b=0, c=0, events=None):
        player_round = create_player_round(rnd, player)
        stake(rnd, player_round, a + b + c, a, b, c, events=events)
        return player_round

    return _place


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path, game=GameConfig(fee_bps=500))


@pytest.fixture
def db_engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'frontline-test.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return make_session_factory(db_engine)


@pytest.fixture
def service(session_factory, settings) -> GameService:
    return GameService(session_factory=session_factory, settings=settings)
