"""User queries."""

from lobby.application.queries.user.get_user_me_query import GetUserMeQuery
from lobby.application.queries.user.get_user_query import GetUserQuery

__all__ = ["GetUserMeQuery", "GetUserQuery"]
