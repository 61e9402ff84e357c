"""Fetch a single room."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from lobby.domain.room import Room, RoomNotFoundError, RoomRepository

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory


class GetRoomQuery:
    """Query to retrieve a room with its players."""

    def __init__(self, room_repository: RoomRepository):
        self._room_repo = room_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetRoomQuery:
        return cls(room_repository=factory.room_repository())

    async def execute(self, room_id: UUID) -> Room:
        room = await self._room_repo.find_by_id(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room
