"""Set or clear the current user's readiness in a room."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from lobby.application.commands.room._room_command import RoomCommand
from lobby.domain.room import Room

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class GetReadyCommand(RoomCommand):
    """Mark the current user's player as ready."""

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetReadyCommand:
        return cls(
            room_repository=factory.room_repository(),
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, room_id: UUID) -> Room:
        room = await self._find_room(room_id)
        user = await self._find_current_user()

        room.get_ready(user.id)
        room = await self._room_repo.update(room)

        logger.info("Player %s is ready in room %s", user.id, room.id)
        return room


class CancelReadyCommand(RoomCommand):
    """Mark the current user's player as not ready."""

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CancelReadyCommand:
        return cls(
            room_repository=factory.room_repository(),
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, room_id: UUID) -> Room:
        room = await self._find_room(room_id)
        user = await self._find_current_user()

        room.cancel_ready(user.id)
        room = await self._room_repo.update(room)

        logger.info("Player %s cancelled ready in room %s", user.id, room.id)
        return room
