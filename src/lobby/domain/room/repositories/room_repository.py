"""Room repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from lobby.domain.room.aggregates.room import Room
from lobby.domain.room.value_objects import RoomStatus
from lobby.domain.shared.pagination import Pagination


class RoomRepository(ABC):
    """Repository interface for Room aggregates."""

    @abstractmethod
    async def find_by_id(self, room_id: UUID) -> Optional[Room]:
        """Find a room by ID, or None."""

    @abstractmethod
    async def create(self, room: Room) -> Room:
        """
        Persist a new room together with its players.

        Raises
        ------
        HostAlreadyInRoomError
            If a player of the room already plays in another room
        """

    @abstractmethod
    async def update(self, room: Room) -> Room:
        """
        Replace the stored room with the aggregate's state.

        The write only succeeds if the stored version still equals
        ``room.version``; the returned room carries the bumped version.

        Raises
        ------
        RoomNotFoundError
            If the room no longer exists
        ConcurrencyError
            If the room was modified since it was loaded
        PlayerAlreadyInRoomError
            If a newly added player already plays in another room
        """

    @abstractmethod
    async def delete_by_id(self, room_id: UUID) -> None:
        """Delete a room and its players. Missing rooms are ignored."""

    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every room. Used to reset state in tests."""

    @abstractmethod
    async def find_by_status(
        self,
        status: RoomStatus,
        page: int,
        offset: int,
    ) -> Pagination[Room]:
        """
        Return one page of rooms with the given status, oldest first.

        Parameters
        ----------
        status
            Room status to filter by
        page
            0-based page index
        offset
            Page size
        """

    @abstractmethod
    async def has_player_joined_room(self, user_id: UUID) -> bool:
        """Check whether the user plays in any room."""
