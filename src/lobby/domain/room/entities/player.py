"""Player entity owned by a room."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from lobby.domain.user import User


class Player:
    """Room-scoped membership record of a user.

    The id equals the user's id; the nickname is a snapshot taken when the
    player joined.
    """

    def __init__(self, id: UUID, nickname: str, readiness: bool = False):
        self._id = id
        self._nickname = nickname
        self._readiness = readiness

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def nickname(self) -> str:
        return self._nickname

    @property
    def readiness(self) -> bool:
        return self._readiness

    def get_ready(self) -> None:
        self._readiness = True

    def cancel_ready(self) -> None:
        self._readiness = False

    @classmethod
    def from_user(cls, user: User) -> Player:
        return cls(id=user.id, nickname=user.nickname)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Player(id={self._id}, nickname={self._nickname!r}, "
            f"readiness={self._readiness})"
        )
