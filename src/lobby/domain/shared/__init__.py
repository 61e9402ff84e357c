"""Shared domain components.

This module exports shared value objects, exceptions, and base classes
used across domain boundaries.
"""

from lobby.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConcurrencyError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from lobby.domain.shared.pagination import Pagination
from lobby.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "ConflictError",
    "ConcurrencyError",
    # Values
    "Pagination",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
