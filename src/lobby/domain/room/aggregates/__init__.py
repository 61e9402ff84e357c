"""Room aggregates."""

from lobby.domain.room.aggregates.room import Room

__all__ = ["Room"]
