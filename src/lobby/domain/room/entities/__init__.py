"""Room entities."""

from lobby.domain.room.entities.player import Player

__all__ = ["Player"]
