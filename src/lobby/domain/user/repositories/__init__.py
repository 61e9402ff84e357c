"""User repository interfaces."""

from lobby.domain.user.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
