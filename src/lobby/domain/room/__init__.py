"""Room domain - the room aggregate and its lifecycle rules.

This domain handles:
- Room aggregate (membership, password lock, capacity, host)
- Player entity (per-room membership with readiness)
- RoomCreated event for the presentation layer
- Repository interface (implementation lives in infrastructure)
"""

from lobby.domain.room.aggregates import Room
from lobby.domain.room.entities import Player
from lobby.domain.room.events import (
    DomainEvent,
    GameSummary,
    PlayerSummary,
    RoomCreated,
    RoomEventType,
)
from lobby.domain.room.exceptions import (
    HostAlreadyInRoomError,
    InvalidRoomCapacityError,
    InvalidRoomPasswordError,
    NotRoomHostError,
    PlayerAlreadyInRoomError,
    PlayerNotJoinedError,
    RoomFullError,
    RoomNotFoundError,
    WrongPasswordError,
)
from lobby.domain.room.repositories import RoomRepository
from lobby.domain.room.value_objects import RoomStatus

__all__ = [
    "DomainEvent",
    "GameSummary",
    "HostAlreadyInRoomError",
    "InvalidRoomCapacityError",
    "InvalidRoomPasswordError",
    "NotRoomHostError",
    "Player",
    "PlayerAlreadyInRoomError",
    "PlayerNotJoinedError",
    "PlayerSummary",
    "Room",
    "RoomCreated",
    "RoomEventType",
    "RoomFullError",
    "RoomNotFoundError",
    "RoomRepository",
    "RoomStatus",
    "WrongPasswordError",
]
