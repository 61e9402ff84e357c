"""Leave a room, deleting it when nobody (or no host) is left."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from lobby.application.commands.room._room_command import RoomCommand
from lobby.domain.room import Room

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class LeaveRoomCommand(RoomCommand):
    """Remove the current user from a room."""

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> LeaveRoomCommand:
        return cls(
            room_repository=factory.room_repository(),
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, room_id: UUID) -> Optional[Room]:
        """Return the updated room, or None if the room was deleted."""
        room = await self._find_room(room_id)
        user = await self._find_current_user()

        host_left = room.is_host(user.id)
        room.leave_room(user.id)

        # A room never outlives its host
        if room.is_empty() or host_left:
            await self._room_repo.delete_by_id(room.id)
            logger.info(
                "User %s left room %s, room closed (host left: %s)",
                user.id,
                room.id,
                host_left,
            )
            return None

        room = await self._room_repo.update(room)
        logger.info(
            "User %s left room %s (%d/%d)",
            user.id,
            room.id,
            room.current_players,
            room.max_players,
        )
        return room
