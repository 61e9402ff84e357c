"""Root pytest configuration.

Test Structure:
    tests/
    ├── lobby/
    │   ├── unit/              # Fast, isolated tests (mocks, no I/O)
    │   └── integration/       # Tests against in-memory SQLite
    └── shared/                # Shared fixtures and utilities

Integration tests run by default; they need no external services.
Pass ``--skip-integration`` (or set SKIP_INTEGRATION=1) to run unit
tests only.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from lobby_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--skip-integration",
        action="store_true",
        default=False,
        help="Skip tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "unit: Fast tests without I/O",
    )
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests when explicitly requested."""
    skip_integration = config.getoption("--skip-integration") or os.environ.get(
        "SKIP_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    if not skip_integration:
        return

    skip = pytest.mark.skip(reason="Integration tests disabled")
    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if "integration" in item_markers:
            item.add_marker(skip)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure settings are loaded fresh for the test session."""
    clear_settings_cache()
    yield
    clear_settings_cache()
