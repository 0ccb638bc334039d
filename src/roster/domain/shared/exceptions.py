"""Shared domain exceptions and error codes.

Every error raised by the domain and application layers derives from
``DomainException``. The presentation layer maps ``code`` to an HTTP
status; ``message`` is safe to show to clients, ``details`` is only logged.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Stable error codes returned to API clients."""

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # 401 / 403
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    FORBIDDEN = "FORBIDDEN"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"

    # 409
    CONFLICT = "CONFLICT"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"

    # 500
    TRANSACTION_FAILED = "TRANSACTION_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code; falls back to the class's ``default_code``
    details
        Additional context for the logs, never sent to clients
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input violates a domain rule."""

    default_code = ErrorCode.VALIDATION_ERROR


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The operation conflicts with stored state, e.g. a taken email."""

    default_code = ErrorCode.CONFLICT


class PersistenceError(DomainException):
    """A write could not be completed and was rolled back."""

    default_code = ErrorCode.TRANSACTION_FAILED
