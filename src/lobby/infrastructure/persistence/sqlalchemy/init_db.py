"""Schema management for the lobby database.

Backs the ``lobby-db-init``, ``lobby-db-drop`` and ``lobby-db-reset``
console scripts. There are no migrations: ``create_tables`` only adds
missing tables, so changing a column means resetting the database.
"""

import asyncio
import logging
import sys
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

# Registers every lobby table on Base.metadata
import lobby.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from lobby.infrastructure.persistence.sqlalchemy.models.base import Base
from lobby.infrastructure.persistence.sqlalchemy.session import (
    create_engine_from_settings,
)
from lobby_config.logging_config import configure_logging
from lobby_config.settings import get_settings

logger = logging.getLogger(__name__)

CONFIRMATION = "yes"


def lobby_tables() -> list[str]:
    """Table names in dependency order (users and games before rooms)."""
    return [table.name for table in Base.metadata.sorted_tables]


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Create the lobby tables that do not exist yet.

    Existing tables are left untouched, so running this against a live
    database never loses rooms or registrations. An engine passed in is
    left open for the caller; one built from settings is disposed.
    """
    owned = engine is None
    engine = engine or create_engine_from_settings()
    logger.info("Creating missing lobby tables: %s", ", ".join(lobby_tables()))

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    finally:
        if owned:
            await engine.dispose()

    logger.info("Lobby schema ready")


async def drop_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Drop every lobby table, deleting all users, games and open rooms.

    Tables are dropped in reverse dependency order.
    """
    owned = engine is None
    engine = engine or create_engine_from_settings()
    logger.warning("Dropping lobby tables: %s", ", ".join(reversed(lobby_tables())))

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    finally:
        if owned:
            await engine.dispose()

    logger.info("Lobby tables dropped")


def _display_url(database_url: str) -> str:
    # Only the host/database part; never print credentials
    return database_url.rsplit("@", 1)[-1]


def _confirm_destruction(database_url: str) -> bool:
    print(f"Target database: {_display_url(database_url)}")
    print("All users, game registrations and open rooms will be deleted.")
    answer = input(f"Type '{CONFIRMATION}' to continue: ")
    return answer.strip().lower() == CONFIRMATION


async def _reset(drop_only: bool, force: bool) -> int:
    settings = get_settings()
    if not force and not _confirm_destruction(settings.database_url):
        print("Nothing was changed.")
        return 1

    await drop_tables()
    if not drop_only:
        await create_tables()
    return 0


def _force_requested(argv: list[str]) -> bool:
    return "--force" in argv or "-f" in argv


def db_init():
    """Create missing lobby tables."""
    configure_logging()
    logger.info("Database: %s", _display_url(get_settings().database_url))
    asyncio.run(create_tables())


def db_drop():
    """Drop all lobby tables after confirmation (``--force`` skips it)."""
    configure_logging()
    sys.exit(asyncio.run(_reset(drop_only=True, force=_force_requested(sys.argv))))


def db_reset():
    """Drop and recreate all lobby tables (``--force`` skips confirmation)."""
    configure_logging()
    sys.exit(asyncio.run(_reset(drop_only=False, force=_force_requested(sys.argv))))
