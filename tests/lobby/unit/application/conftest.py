"""Shared mocks for application-layer unit tests."""

from unittest.mock import AsyncMock

import pytest

from tests.shared.fixtures.factories import TestUserFactory


@pytest.fixture
def mock_room_repo():
    """Room repository mock; update echoes the room back."""
    repo = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=None)
    repo.has_player_joined_room = AsyncMock(return_value=False)
    repo.create = AsyncMock(side_effect=lambda room: room)
    repo.update = AsyncMock(side_effect=lambda room: room)
    repo.delete_by_id = AsyncMock()
    return repo


@pytest.fixture
def mock_user_repo():
    repo = AsyncMock()
    repo.find_by_identity = AsyncMock(return_value=TestUserFactory.alice_user())
    return repo


@pytest.fixture
def mock_game_repo():
    return AsyncMock()


@pytest.fixture
def mock_event_bus():
    bus = AsyncMock()
    bus.publish = AsyncMock()
    return bus


@pytest.fixture
def alice():
    return TestUserFactory.alice_user()


@pytest.fixture
def alice_current_user():
    return TestUserFactory.alice_current_user()


@pytest.fixture
def bob():
    return TestUserFactory.bob_user()


@pytest.fixture
def bob_current_user():
    return TestUserFactory.bob_current_user()
