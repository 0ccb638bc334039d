"""Student domain exceptions."""

from uuid import UUID

from roster.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    PersistenceError,
)


class StudentNotFoundError(EntityNotFoundError):
    """Student record not found."""

    def __init__(self, student_id: UUID | str) -> None:
        self.student_id = student_id
        super().__init__(
            f"Student with id {student_id} not found",
            code=ErrorCode.STUDENT_NOT_FOUND,
            details={"student_id": str(student_id)},
        )


class StudentEmailAlreadyExistsError(ConflictError):
    """Another student record already uses this email."""

    def __init__(self, email: str, reason: str | None = None) -> None:
        self.email = email
        super().__init__(
            "A student with this email already exists",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email, "reason": reason},
        )


class TransactionFailedError(PersistenceError):
    """A write failed and the transaction was rolled back."""

    def __init__(self, student_id: UUID | str, reason: str) -> None:
        self.student_id = student_id
        super().__init__(
            "The update could not be completed",
            details={"student_id": str(student_id), "reason": reason},
        )
