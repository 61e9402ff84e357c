"""Close a room on the host's request."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from lobby.application.commands.room._room_command import RoomCommand
from lobby.domain.room import NotRoomHostError

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CloseRoomCommand(RoomCommand):
    """Delete a room, regardless of occupancy, if the requester hosts it."""

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CloseRoomCommand:
        return cls(
            room_repository=factory.room_repository(),
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, room_id: UUID) -> None:
        room = await self._find_room(room_id)
        user = await self._find_current_user()

        try:
            room.validate_room_host(user.id)
        except NotRoomHostError as e:
            logger.info(
                "User %s may not close room %s: %s",
                user.id,
                room.id,
                e.code.value,
            )
            raise

        await self._room_repo.delete_by_id(room.id)
        logger.info(
            "Room %s closed by host %s (%d players removed)",
            room.id,
            user.id,
            room.current_players,
        )
