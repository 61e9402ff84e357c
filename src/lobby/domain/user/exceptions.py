"""User domain exceptions."""

from lobby.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """
    Raised when email format is invalid.

    This exception is raised during Email value object creation
    when the provided string doesn't match expected email format.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, key: str = "id", value: object = None) -> None:
        super().__init__("User", key, value, code=ErrorCode.USER_NOT_FOUND)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class IdentityAlreadyBoundError(ConflictError):
    """An identity-provider reference already belongs to another user."""

    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(
            f"Identity already bound to another user: {identity}",
            code=ErrorCode.IDENTITY_ALREADY_BOUND,
            details={"identity": identity},
        )
