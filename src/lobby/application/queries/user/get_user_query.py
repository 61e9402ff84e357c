"""Look up a user by identity-provider reference."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lobby.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory


class GetUserQuery:
    """Query to retrieve a user by one of their linked identities."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserQuery:
        return cls(user_repo=factory.user_repository())

    async def execute(self, user_identity: str) -> User:
        user = await self._user_repo.find_by_identity(user_identity)
        if user is None:
            raise UserNotFoundError("userIdentity", user_identity)
        return user
