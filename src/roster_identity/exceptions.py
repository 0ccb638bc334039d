"""Identity and access exceptions.

These exceptions are raised by the roster_identity package and are mapped
to HTTP responses by the presentation layer's exception handlers.
"""

from typing import Any

from roster.domain.shared.exceptions import DomainException, ErrorCode


class NotAuthenticatedError(DomainException):
    """Raised when a request carries no usable session token."""

    def __init__(
        self,
        message: str = "Not authenticated",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, ErrorCode.NOT_AUTHENTICATED, details)


class ForbiddenError(DomainException):
    """Raised when an authenticated account lacks every permitted role."""

    def __init__(
        self,
        message: str = "Insufficient role for this operation",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, ErrorCode.FORBIDDEN, details)


class InvalidCredentialsError(DomainException):
    """Raised when the password does not match during login."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)
