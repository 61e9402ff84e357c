"""Room value objects."""

from lobby.domain.room.value_objects.room_status import RoomStatus

__all__ = ["RoomStatus"]
