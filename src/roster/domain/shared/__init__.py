"""Shared domain components.

This module exports shared exceptions and utilities used across
domain boundaries.
"""

from roster.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    PersistenceError,
    ValidationError,
)
from roster.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "PersistenceError",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
