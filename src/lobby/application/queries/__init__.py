"""Query layer - read operations without side effects."""

from lobby.application.queries.room import GetRoomQuery, ListRoomsQuery
from lobby.application.queries.user import GetUserMeQuery, GetUserQuery

__all__ = [
    "GetRoomQuery",
    "GetUserMeQuery",
    "GetUserQuery",
    "ListRoomsQuery",
]
