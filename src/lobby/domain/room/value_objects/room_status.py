"""Room status enumeration."""

from enum import Enum


class RoomStatus(Enum):
    """Lifecycle status of a room.

    Only WAITING is reached by the lobby use-cases; PLAYING and CLOSED are
    reserved for game start and shutdown.
    """

    WAITING = "WAITING"
    PLAYING = "PLAYING"
    CLOSED = "CLOSED"

    def is_open(self) -> bool:
        return self is not RoomStatus.CLOSED

    @classmethod
    def from_string(cls, value: str) -> "RoomStatus":
        try:
            return cls(value.upper())
        except ValueError as e:
            valid = ", ".join(s.value for s in cls)
            msg = f"Invalid room status '{value}'. Valid statuses: {valid}"
            raise ValueError(msg) from e
