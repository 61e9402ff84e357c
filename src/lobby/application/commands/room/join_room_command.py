"""Join an existing room."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from lobby.application.commands.room._room_command import RoomCommand
from lobby.domain.room import (
    Player,
    PlayerAlreadyInRoomError,
    Room,
    RoomFullError,
    WrongPasswordError,
)
from lobby.domain.shared import DomainException

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class JoinRoomCommand(RoomCommand):
    """Add the current user to a room as a not-ready player.

    Checks run in a fixed order, each with its own error: playing in any
    room, then the password of a locked room, then capacity.
    """

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> JoinRoomCommand:
        return cls(
            room_repository=factory.room_repository(),
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, room_id: UUID, password: Optional[str] = None) -> Room:
        room = await self._find_room(room_id)
        user = await self._find_current_user()

        if await self._room_repo.has_player_joined_room(user.id):
            raise self._rejected(PlayerAlreadyInRoomError(user.id), room, user.id)

        if room.is_locked and not room.is_password_correct(password):
            raise self._rejected(WrongPasswordError(room.id), room, user.id)

        if room.is_full():
            raise self._rejected(RoomFullError(room.id), room, user.id)

        room.add_player(Player.from_user(user))
        room = await self._room_repo.update(room)

        logger.info(
            "User %s joined room %s (%d/%d)",
            user.id,
            room.id,
            room.current_players,
            room.max_players,
        )
        return room

    @staticmethod
    def _rejected(
        error: DomainException,
        room: Room,
        user_id: UUID,
    ) -> DomainException:
        logger.info(
            "Join of room %s by user %s rejected: %s",
            room.id,
            user_id,
            error.code.value,
        )
        return error
