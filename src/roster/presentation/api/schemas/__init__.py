"""Pydantic schemas for API request/response models."""

from roster.presentation.api.schemas.auth import (
    AccountResponse,
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)
from roster.presentation.api.schemas.common import ErrorResponse, HealthResponse
from roster.presentation.api.schemas.students import (
    CreateStudentRequest,
    GradeRequest,
    GradeResponse,
    StudentResponse,
    UpdateStudentRequest,
)

__all__ = [
    # Auth
    "AccountResponse",
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Students
    "CreateStudentRequest",
    "GradeRequest",
    "GradeResponse",
    "StudentResponse",
    "UpdateStudentRequest",
]
