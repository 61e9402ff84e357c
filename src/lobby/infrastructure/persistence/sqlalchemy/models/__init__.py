"""SQLAlchemy database models."""

from lobby.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin
from lobby.infrastructure.persistence.sqlalchemy.models.game_registration_model import (
    GameRegistrationModel,
)
from lobby.infrastructure.persistence.sqlalchemy.models.room_model import (
    RoomModel,
    RoomPlayerModel,
)
from lobby.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserIdentityModel,
    UserModel,
)

__all__ = [
    "Base",
    "GameRegistrationModel",
    "RoomModel",
    "RoomPlayerModel",
    "TimestampMixin",
    "UserIdentityModel",
    "UserModel",
]
