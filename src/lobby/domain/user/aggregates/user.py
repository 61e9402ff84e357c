from datetime import datetime
from typing import Iterable, Optional, Union
from uuid import UUID, uuid4

from lobby.domain.shared.time import utc_now
from lobby.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    Holds the identity of a lobby user. Each user is uniquely identified
    by a random UUID generated at creation time; one or more external
    identity-provider references are linked to it on login.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        nickname: str,
        identities: Optional[Iterable[str]] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._nickname = nickname
        self._identities = frozenset(identities or ())
        self._id = id if id is not None else uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def nickname(self) -> str:
        return self._nickname

    @property
    def identities(self) -> frozenset[str]:
        return self._identities

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_identity(self, identity: str) -> bool:
        return identity in self._identities

    def link_identity(self, identity: str) -> None:
        if identity in self._identities:
            return
        self._identities = self._identities | {identity}
        self._updated_at = utc_now()

    def rename(self, nickname: str) -> None:
        self._nickname = nickname
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        nickname: str,
        identity: Optional[str] = None,
    ) -> "User":
        return cls(
            email=email,
            nickname=nickname,
            identities=[identity] if identity else None,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        nickname: str,
        identities: Iterable[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            nickname=nickname,
            identities=identities,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
