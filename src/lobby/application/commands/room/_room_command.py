"""Lookups shared by the room lifecycle commands."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from lobby.domain.room import Room, RoomNotFoundError, RoomRepository
from lobby.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from lobby.application.ports import CurrentUser


class RoomCommand:
    """Base for commands acting on one room on behalf of the current user."""

    def __init__(
        self,
        room_repository: RoomRepository,
        user_repository: UserRepository,
        current_user: CurrentUser,
    ):
        self._room_repo = room_repository
        self._user_repo = user_repository
        self._identity = current_user.identity

    async def _find_room(self, room_id: UUID) -> Room:
        room = await self._room_repo.find_by_id(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    async def _find_current_user(self) -> User:
        user = await self._user_repo.find_by_identity(self._identity)
        if user is None:
            raise UserNotFoundError("identity", self._identity)
        return user
