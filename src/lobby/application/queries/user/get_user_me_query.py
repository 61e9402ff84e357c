"""Query to get the user behind the current principal."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from lobby.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory


class GetUserMeQuery:
    """Query to retrieve the current user by email."""

    def __init__(
        self,
        user_repo: UserRepository,
        email: Optional[str] = None,
    ) -> None:
        self._user_repo = user_repo
        self._email = email

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserMeQuery:
        return cls(
            user_repo=factory.user_repository(),
            email=factory.current_user.email,
        )

    async def execute(self, email: Optional[str] = None) -> User:
        resolved_email = email or self._email
        if not resolved_email:
            msg = "Email must be provided either at construction or execution"
            raise ValueError(msg)

        user = await self._user_repo.find_by_email(resolved_email)
        if user is None:
            raise UserNotFoundError("email", resolved_email)
        return user
