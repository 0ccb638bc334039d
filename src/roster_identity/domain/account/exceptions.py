"""Account domain exceptions."""

from uuid import UUID

from roster.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email address is empty."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email address is already registered",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class AccountNotFoundError(EntityNotFoundError):
    """Account not found."""

    def __init__(self, identifier: UUID | str) -> None:
        self.identifier = identifier
        super().__init__(
            "Account not found",
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            details={"account": str(identifier)},
        )
