"""Integration tests for lobby schema management."""

import pytest
import pytest_asyncio
from sqlalchemy import inspect

from lobby.infrastructure.persistence.sqlalchemy import init_db
from lobby.infrastructure.persistence.sqlalchemy.session import (
    create_engine_from_settings,
)
from lobby_config import Settings
from lobby_config.settings import clear_settings_cache

pytestmark = pytest.mark.integration

TABLES = {"users", "user_identities", "game_registrations", "rooms", "room_players"}


@pytest.fixture
def database_url(tmp_path, monkeypatch):
    url = f"sqlite+aiosqlite:///{tmp_path / 'schema.db'}"
    monkeypatch.setenv("LOBBY_DATABASE_URL", url)
    clear_settings_cache()
    yield url
    clear_settings_cache()


@pytest_asyncio.fixture
async def engine(database_url):
    engine = create_engine_from_settings(
        Settings(_env_file=None, database_url=database_url),
    )
    yield engine
    await engine.dispose()


async def _table_names(engine) -> set[str]:
    async with engine.connect() as conn:
        return set(await conn.run_sync(lambda c: inspect(c).get_table_names()))


class TestSchemaManagement:
    def test_lobby_tables_in_dependency_order(self):
        tables = init_db.lobby_tables()

        assert set(tables) == TABLES
        assert tables.index("users") < tables.index("rooms")
        assert tables.index("rooms") < tables.index("room_players")

    @pytest.mark.asyncio
    async def test_create_then_drop(self, engine):
        await init_db.create_tables(engine)
        assert await _table_names(engine) == TABLES

        await init_db.drop_tables(engine)
        assert await _table_names(engine) == set()

    @pytest.mark.asyncio
    async def test_create_is_idempotent(self, engine):
        await init_db.create_tables(engine)
        await init_db.create_tables(engine)

        assert await _table_names(engine) == TABLES

    @pytest.mark.asyncio
    async def test_forced_reset_recreates_tables(self, engine):
        await init_db.create_tables(engine)

        assert await init_db._reset(drop_only=False, force=True) == 0
        assert await _table_names(engine) == TABLES

    @pytest.mark.asyncio
    async def test_declined_confirmation_keeps_tables(self, engine, monkeypatch):
        await init_db.create_tables(engine)
        monkeypatch.setattr("builtins.input", lambda _prompt: "no")

        assert await init_db._reset(drop_only=True, force=False) == 1
        assert await _table_names(engine) == TABLES

    @pytest.mark.asyncio
    async def test_confirmed_drop(self, engine, monkeypatch):
        await init_db.create_tables(engine)
        monkeypatch.setattr("builtins.input", lambda _prompt: " YES ")

        assert await init_db._reset(drop_only=True, force=False) == 0
        assert await _table_names(engine) == set()


class TestDisplayUrl:
    def test_credentials_hidden(self):
        url = "postgresql+asyncpg://lobby:s3cret@db:5432/lobby"

        assert init_db._display_url(url) == "db:5432/lobby"

    def test_url_without_credentials_unchanged(self):
        assert init_db._display_url("sqlite+aiosqlite:///./lobby.db") == (
            "sqlite+aiosqlite:///./lobby.db"
        )
