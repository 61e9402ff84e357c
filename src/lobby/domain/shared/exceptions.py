"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions should inherit from DomainException
so a boundary layer can map them to its own outcomes without string matching.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public contract. Should not be changed.
    """

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_ROOM_CAPACITY = "INVALID_ROOM_CAPACITY"
    INVALID_ROOM_PASSWORD = "INVALID_ROOM_PASSWORD"
    INVALID_GAME_REGISTRATION = "INVALID_GAME_REGISTRATION"

    # Not Found Errors
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    GAME_NOT_FOUND = "GAME_NOT_FOUND"

    # Conflict Errors
    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    IDENTITY_ALREADY_BOUND = "IDENTITY_ALREADY_BOUND"
    GAME_ALREADY_REGISTERED = "GAME_ALREADY_REGISTERED"

    # Business Rule Violations
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    ROOM_PASSWORD_INCORRECT = "ROOM_PASSWORD_INCORRECT"
    ROOM_FULL = "ROOM_FULL"
    PLAYER_JOIN_ROOM_ERROR = "PLAYER_JOIN_ROOM_ERROR"
    HOST_ALREADY_IN_ROOM = "HOST_ALREADY_IN_ROOM"
    PLAYER_NOT_JOINED = "PLAYER_NOT_JOINED"
    NOT_ROOM_HOST = "NOT_ROOM_HOST"

    # Concurrency Errors
    CONCURRENCY_CONFLICT = "CONCURRENCY_CONFLICT"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class BusinessRuleViolation(DomainException):
    """Raised when a business rule or domain invariant is violated."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found.

    The message names the missing resource only (``"Room not found"``);
    the lookup key is kept in ``details``.
    """

    def __init__(
        self,
        resource: str,
        key: str | None = None,
        value: Any = None,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
    ) -> None:
        super().__init__(
            message=f"{resource} not found",
            code=code,
            details={
                "resource": resource,
                "key": key,
                "value": str(value) if value is not None else None,
            },
        )
        self.resource = resource
        self.key = key


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConcurrencyError(DomainException):
    """Raised when concurrent modifications conflict."""

    def __init__(
        self,
        message: str = "The resource was modified by another request",
        code: ErrorCode = ErrorCode.CONCURRENCY_CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
