"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from lobby.domain.game.repositories import GameRegistrationRepository
from lobby.domain.room.repositories import RoomRepository
from lobby.domain.user.repositories import UserRepository

if TYPE_CHECKING:
    from lobby.application.ports import CurrentUser, EventBus


class RepositoryFactory(Protocol):
    """Protocol for creating request-scoped repositories."""

    @property
    def current_user(self) -> CurrentUser:
        """Get the authenticated principal of this request."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def room_repository(self) -> RoomRepository:
        """Get room repository."""
        ...

    def game_registration_repository(self) -> GameRegistrationRepository:
        """Get game registration repository."""
        ...

    def event_bus(self) -> EventBus:
        """Get the event bus."""
        ...
