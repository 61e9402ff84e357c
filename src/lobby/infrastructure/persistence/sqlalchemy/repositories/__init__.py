"""SQLAlchemy repository implementations."""

from lobby.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from lobby.infrastructure.persistence.sqlalchemy.repositories.game_registration_repository import (  # NOQA: E501
    GameRegistrationRepositorySQLAlchemy,
)
from lobby.infrastructure.persistence.sqlalchemy.repositories.room_repository import (
    RoomRepositorySQLAlchemy,
)
from lobby.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "GameRegistrationRepositorySQLAlchemy",
    "RoomRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
