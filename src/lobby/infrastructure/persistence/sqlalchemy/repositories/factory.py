"""SQLAlchemy repository factory for creating request-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from lobby.infrastructure.events import InMemoryEventBus
from lobby.infrastructure.persistence.sqlalchemy.repositories.game_registration_repository import (  # NOQA: E501
    GameRegistrationRepositorySQLAlchemy,
)
from lobby.infrastructure.persistence.sqlalchemy.repositories.room_repository import (
    RoomRepositorySQLAlchemy,
)
from lobby.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from lobby.application.ports import CurrentUser, EventBus


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(
        self,
        session: AsyncSession,
        current_user: CurrentUser,
        event_bus: Optional[EventBus] = None,
    ):
        self._session = session
        self._current_user = current_user
        self._event_bus = event_bus

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._room_repo: RoomRepositorySQLAlchemy | None = None
        self._game_repo: GameRegistrationRepositorySQLAlchemy | None = None

    @property
    def current_user(self) -> CurrentUser:
        return self._current_user

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def room_repository(self) -> RoomRepositorySQLAlchemy:
        if self._room_repo is None:
            self._room_repo = RoomRepositorySQLAlchemy(self._session)
        return self._room_repo

    def game_registration_repository(self) -> GameRegistrationRepositorySQLAlchemy:
        if self._game_repo is None:
            self._game_repo = GameRegistrationRepositorySQLAlchemy(self._session)
        return self._game_repo

    def event_bus(self) -> EventBus:
        if self._event_bus is None:
            self._event_bus = InMemoryEventBus()
        return self._event_bus
