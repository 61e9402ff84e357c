"""List rooms in the lobby, one page at a time."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from lobby.domain.room import Room, RoomRepository, RoomStatus
from lobby.domain.shared import Pagination, ValidationError

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class ListRoomsQuery:
    """List rooms filtered by status."""

    def __init__(self, room_repository: RoomRepository):
        self._room_repo = room_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListRoomsQuery:
        return cls(room_repository=factory.room_repository())

    async def execute(
        self,
        status: Union[str, RoomStatus] = RoomStatus.WAITING,
        page: int = 0,
        offset: int = DEFAULT_PAGE_SIZE,
    ) -> Pagination[Room]:
        if isinstance(status, str):
            try:
                status = RoomStatus.from_string(status)
            except ValueError as e:
                raise ValidationError(str(e), details={"status": status}) from e

        if page < 0:
            msg = f"Page must be >= 0, got {page}"
            raise ValidationError(msg, details={"page": page})
        if not 0 < offset <= MAX_PAGE_SIZE:
            msg = f"Offset must be between 1 and {MAX_PAGE_SIZE}, got {offset}"
            raise ValidationError(msg, details={"offset": offset})

        return await self._room_repo.find_by_status(status, page, offset)
