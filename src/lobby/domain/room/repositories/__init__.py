"""Room repository interfaces."""

from lobby.domain.room.repositories.room_repository import RoomRepository

__all__ = ["RoomRepository"]
