"""Room domain events handed to the event bus after successful mutations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any
from uuid import UUID

from lobby.domain.shared.time import utc_now

if TYPE_CHECKING:
    from lobby.domain.room.aggregates import Room


class RoomEventType(str, Enum):
    """Types of room events."""

    ROOM_CREATED = "room_created"


@dataclass(frozen=True)
class GameSummary:
    id: UUID
    name: str


@dataclass(frozen=True)
class PlayerSummary:
    id: UUID
    nickname: str


@dataclass(frozen=True)
class DomainEvent(ABC):
    """Base class for domain events."""

    occurred_at: datetime = field(default_factory=utc_now, kw_only=True)

    @property
    @abstractmethod
    def event_type(self) -> RoomEventType:
        """Channel the event is published on."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type.value,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class RoomCreated(DomainEvent):
    """Emitted when a host opens a new room.

    Carries a full snapshot of the room so the presentation layer can
    render it without another lookup.
    """

    room_id: UUID
    name: str
    game: GameSummary
    host: PlayerSummary
    current_players: int
    max_players: int
    min_players: int
    is_locked: bool

    @property
    def event_type(self) -> RoomEventType:
        return RoomEventType.ROOM_CREATED

    @classmethod
    def from_room(cls, room: Room) -> RoomCreated:
        return cls(
            room_id=room.id,
            name=room.name,
            game=GameSummary(id=room.game.id, name=room.game.display_name),
            host=PlayerSummary(id=room.host.id, nickname=room.host.nickname),
            current_players=room.current_players,
            max_players=room.max_players,
            min_players=room.min_players,
            is_locked=room.is_locked,
        )

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d.update(
            {
                "room_id": str(self.room_id),
                "name": self.name,
                "game": {"id": str(self.game.id), "name": self.game.name},
                "host": {"id": str(self.host.id), "nickname": self.host.nickname},
                "current_players": self.current_players,
                "max_players": self.max_players,
                "min_players": self.min_players,
                "is_locked": self.is_locked,
            }
        )
        return d
