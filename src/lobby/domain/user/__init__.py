"""User domain - manages player identity.

This domain handles:
- User aggregate (id, email, nickname, linked identity providers)
- Repository interface (implementation lives in infrastructure)

Design notes:
- User ID is a random UUID4 generated at creation and never changes
- Email is unique and normalized to lower case
- An identity-provider reference (e.g. "google-oauth2|1234") belongs to at
  most one user
"""

from lobby.domain.user.aggregates import User
from lobby.domain.user.exceptions import (
    EmailAlreadyExistsError,
    IdentityAlreadyBoundError,
    InvalidEmailError,
    UserNotFoundError,
)
from lobby.domain.user.repositories import UserRepository
from lobby.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "IdentityAlreadyBoundError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
