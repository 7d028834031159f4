"""Pytest configuration and fixtures."""

import logging
import tempfile
from pathlib import Path

import pytest
import structlog


def make_player(
    player_id: int | None = 1,
    *,
    rank: int = 1,
    country: str = "SUI",
    last: list[int] | None = None,
    weight: int = 80000,
    height: int = 185,
    first_name: str = "Roger",
    last_name: str = "Federer",
):
    """Build a Player (or a PlayerCreate when ``player_id`` is None)."""
    from tennis_roster.models.player import Player, PlayerCreate

    document = {
        "firstName": first_name,
        "lastName": last_name,
        "shortName": f"{first_name[0]}.{last_name[:3].upper()}",
        "sex": "M",
        "country": {"code": country, "picture": f"https://flags.example/{country}.png"},
        "picture": f"https://pictures.example/{last_name.lower()}.png",
        "data": {
            "rank": rank,
            "points": 1000,
            "weight": weight,
            "height": height,
            "age": 30,
            "last": last if last is not None else [1, 0, 1],
        },
    }
    if player_id is None:
        return PlayerCreate.model_validate(document)
    return Player.model_validate({"id": player_id, **document})


@pytest.fixture
def roster():
    """Three players stored out of rank order, two sharing a country."""
    return [
        make_player(1, rank=3, country="ESP", first_name="Carlos", last_name="Alcaraz"),
        make_player(2, rank=1, country="SRB", first_name="Novak", last_name="Djokovic"),
        make_player(3, rank=2, country="ESP", first_name="Rafael", last_name="Nadal"),
    ]


@pytest.fixture
def new_player():
    """A creation payload without an id."""
    return make_player(None, rank=5, country="USA", first_name="Serena", last_name="Williams")


@pytest.fixture
def memory_store(roster):
    """In-memory store seeded with the sample roster."""
    from tennis_roster.store.memory import InMemoryRecordStore

    return InMemoryRecordStore(roster)


@pytest.fixture
def service(memory_store):
    """Player service over the seeded in-memory store."""
    from tennis_roster.services.players import PlayerService

    return PlayerService(memory_store)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path for testing."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp) / "test.db"


@pytest.fixture(scope="session")
def migrated_db_path(tmp_path_factory):
    """Run migrations once per session into a template database."""
    from tennis_roster.schema.migrations import run_migrations

    db = tmp_path_factory.mktemp("session_db") / "template.db"
    run_migrations(db)
    return db


@pytest.fixture
def sample_settings(tmp_path):
    """Sample settings for testing."""
    from tennis_roster.utils.config import Settings

    return Settings(
        store_backend="memory",
        db_path=str(tmp_path / "tennis.sqlite"),
        players_file=str(tmp_path / "players.json"),
        log_level="DEBUG",
        log_format="console",
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the CLI at a temporary JSON roster and reset logging afterwards."""
    from tennis_roster.utils.config import get_settings

    players_file = tmp_path / "players.json"
    monkeypatch.setenv("TENNIS_STORE_BACKEND", "json")
    monkeypatch.setenv("TENNIS_PLAYERS_FILE", str(players_file))
    monkeypatch.setenv("TENNIS_DB_PATH", str(tmp_path / "tennis.sqlite"))
    monkeypatch.setenv("TENNIS_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("TENNIS_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("TENNIS_LOG_FORMAT", "console")
    get_settings.cache_clear()

    yield players_file

    get_settings.cache_clear()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    structlog.reset_defaults()


@pytest.fixture
def player_factory():
    """Return the player builder used by the sample fixtures."""
    return make_player
