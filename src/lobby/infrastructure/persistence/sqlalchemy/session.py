"""Async engine and session construction from settings."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from lobby_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Optional[Settings] = None) -> AsyncEngine:
    """
    Create the async database engine.

    Parameters
    ----------
    settings
        Settings to read ``database_url`` and ``database_echo`` from;
        defaults to the cached application settings

    Returns
    -------
    AsyncEngine instance
    """
    settings = settings or get_settings()
    logger.debug("Creating %s engine", settings.database_type)
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,  # Verify connections before use
    )


def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return a session maker bound to ``engine``."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
