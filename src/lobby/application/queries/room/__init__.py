"""Room queries."""

from lobby.application.queries.room.get_room_query import GetRoomQuery
from lobby.application.queries.room.list_rooms_query import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ListRoomsQuery,
)

__all__ = ["DEFAULT_PAGE_SIZE", "GetRoomQuery", "ListRoomsQuery", "MAX_PAGE_SIZE"]
