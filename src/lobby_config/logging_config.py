"""Logging configuration for lobby processes."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from lobby_config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure application logging.

    Sets up console output with timestamps and module names, applies the
    configured level to the lobby packages and keeps noisy third-party
    loggers at WARNING.
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("lobby").setLevel(log_level)
    logging.getLogger("lobby_config").setLevel(log_level)

    # SQL echo is controlled by database_echo, not the log level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
