"""Register the authenticated principal as a lobby user on first login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lobby.domain.user import Email, User, UserRepository

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory
    from lobby.application.ports import CurrentUser

logger = logging.getLogger(__name__)


class RegisterUserCommand:
    """Return the user behind the current principal, creating it if needed.

    Resolution order:
    1. a user the principal's identity is already linked to
    2. a user with the principal's email (the identity gets linked to it)
    3. a new user
    """

    def __init__(self, user_repository: UserRepository, current_user: CurrentUser):
        self._user_repo = user_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RegisterUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(self) -> User:
        identity = self._current_user.identity
        email = Email(self._current_user.email)

        user = await self._user_repo.find_by_identity(identity)
        if user is not None:
            return user

        user = await self._user_repo.find_by_email(email)
        if user is not None:
            user.link_identity(identity)
            user = await self._user_repo.update(user)
            logger.info("Linked identity %s to user %s", identity, user.id)
            return user

        nickname = self._current_user.nickname or email.value.split("@")[0]
        user = await self._user_repo.create(User.create(email, nickname, identity))
        logger.info("Registered user %s (email: %s)", user.id, user.email)
        return user
