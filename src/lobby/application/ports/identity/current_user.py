"""CurrentUser - the lobby's view of the authenticated principal.

Authentication happens outside the core; the boundary layer translates
its principal (e.g. an OIDC token) into this value.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentUser:
    """Immutable representation of the current authenticated user.

    ``identity`` is the identity-provider reference of the principal
    (the OIDC subject), used to resolve the lobby User.
    """

    identity: str
    email: str
    nickname: str = ""

    def __str__(self) -> str:
        return f"CurrentUser({self.email})"

    def __repr__(self) -> str:
        return (
            f"CurrentUser(identity={self.identity!r}, "
            f"email={self.email!r}, nickname={self.nickname!r})"
        )
