"""
Pytest fixtures for integration tests.

Each test gets a fresh SQLite database file (aiosqlite driver) with all
tables created. A file rather than ``:memory:`` gives every session its
own connection, so tests can interleave independent sessions the way
concurrent requests do.
"""

from typing import Awaitable, Callable, TypeVar

import pytest
import pytest_asyncio

from lobby.application.ports import CurrentUser
from lobby.infrastructure.events import InMemoryEventBus
from lobby.infrastructure.persistence.sqlalchemy.models import Base
from lobby.infrastructure.persistence.sqlalchemy.repositories import (
    GameRegistrationRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)
from lobby.infrastructure.persistence.sqlalchemy.session import (
    create_engine_from_settings,
    session_maker,
)
from lobby_config import Settings
from tests.shared.fixtures.factories import TestGameFactory, TestUserFactory

T = TypeVar("T")


@pytest_asyncio.fixture
async def async_engine(tmp_path):
    settings = Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'lobby.db'}",
    )
    engine = create_engine_from_settings(settings)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def async_session_maker(async_engine):
    return session_maker(async_engine)


@pytest_asyncio.fixture
async def async_session(async_session_maker):
    """Fresh session for each test; uncommitted changes are rolled back."""
    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded(async_session_maker):
    """Commit Alice, Bob, five numbered users and the Mahjong game."""
    async with async_session_maker() as session:
        users = UserRepositorySQLAlchemy(session)
        for user in (
            TestUserFactory.alice_user(),
            TestUserFactory.bob_user(),
            *(TestUserFactory.numbered_user(n) for n in range(1, 6)),
        ):
            await users.create(user)
        await GameRegistrationRepositorySQLAlchemy(session).register_game(
            TestGameFactory.mahjong(),
        )
        await session.commit()


class Lobby:
    """Runs each use-case in its own committed session, like one request."""

    def __init__(self, session_maker_):
        self._session_maker = session_maker_
        self.event_bus = InMemoryEventBus()

    async def run(
        self,
        current_user: CurrentUser,
        use_case: Callable[[SQLAlchemyRepositoryFactory], Awaitable[T]],
    ) -> T:
        async with self._session_maker() as session:
            factory = SQLAlchemyRepositoryFactory(
                session,
                current_user,
                event_bus=self.event_bus,
            )
            try:
                result = await use_case(factory)
            except Exception:
                await session.rollback()
                raise
            await session.commit()
            return result


@pytest.fixture
def lobby(async_session_maker, seeded):
    return Lobby(async_session_maker)
