"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Union
from uuid import UUID

from lobby.domain.user.aggregates.user import User
from lobby.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Find a user by their ID.

        Parameters
        ----------
        user_id
            The user's unique identifier (UUID4)

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_identity(self, identity: str) -> Optional[User]:
        """
        Find the user an identity-provider reference is bound to.

        Parameters
        ----------
        identity
            Provider reference of the authenticated principal,
            e.g. ``"google-oauth2|1234"``

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address.

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def exists_by_identities_in(self, identity: str) -> bool:
        """Check whether any user has the identity linked."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Persist a new user.

        Raises
        ------
        EmailAlreadyExistsError
            If email is already in use by another user
        IdentityAlreadyBoundError
            If one of the user's identities is linked to another user
        """

    @abstractmethod
    async def update(self, user: User) -> User:
        """Replace the stored nickname and identities of an existing user."""

    @abstractmethod
    async def find_all_by_id(self, user_ids: Iterable[UUID]) -> list[User]:
        """Return the users with the given IDs; unknown IDs are skipped."""

    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every user. Used to reset state in tests."""
