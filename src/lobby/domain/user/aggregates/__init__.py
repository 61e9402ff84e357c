"""User aggregates."""

from lobby.domain.user.aggregates.user import User

__all__ = ["User"]
