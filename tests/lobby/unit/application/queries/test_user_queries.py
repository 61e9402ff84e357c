"""Unit tests for GetUserQuery and GetUserMeQuery."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from lobby.application.queries import GetUserMeQuery, GetUserQuery
from lobby.domain.user import UserNotFoundError


class TestGetUserQuery:
    @pytest.mark.asyncio
    async def test_returns_user_by_identity(self, alice):
        repo = AsyncMock()
        repo.find_by_identity.return_value = alice

        user = await GetUserQuery(repo).execute("google-oauth2|alice")

        assert user is alice
        repo.find_by_identity.assert_awaited_once_with("google-oauth2|alice")

    @pytest.mark.asyncio
    async def test_unknown_identity_raises(self):
        repo = AsyncMock()
        repo.find_by_identity.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            await GetUserQuery(repo).execute("nobody")

        assert exc_info.value.details["key"] == "userIdentity"


class TestGetUserMeQuery:
    @pytest.mark.asyncio
    async def test_from_factory_uses_principal_email(self, alice, alice_current_user):
        factory = MagicMock()
        factory.current_user = alice_current_user
        factory.user_repository.return_value.find_by_email = AsyncMock(
            return_value=alice,
        )

        user = await GetUserMeQuery.from_factory(factory).execute()

        assert user is alice
        factory.user_repository.return_value.find_by_email.assert_awaited_once_with(
            "alice@example.com",
        )

    @pytest.mark.asyncio
    async def test_missing_email_raises(self):
        with pytest.raises(ValueError, match="Email must be provided"):
            await GetUserMeQuery(AsyncMock()).execute()

    @pytest.mark.asyncio
    async def test_unknown_email_raises(self):
        repo = AsyncMock()
        repo.find_by_email.return_value = None

        with pytest.raises(UserNotFoundError):
            await GetUserMeQuery(repo, email="ghost@example.com").execute()
