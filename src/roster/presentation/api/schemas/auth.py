"""Authentication schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request schema for account registration."""

    email: EmailStr = Field(..., description="Account email address")
    full_name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(
        ...,
        min_length=6,
        max_length=50,
        description="Password (6-50 characters)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "teacher@example.com",
                "full_name": "Maria Lopez",
                "password": "Abc123",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for account login."""

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=50)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "teacher@example.com",
                "password": "Abc123",
            },
        },
    )


class AccountResponse(BaseModel):
    """Response schema for account information. Never carries the hash."""

    id: UUID
    email: str
    full_name: str
    roles: list[str]
    is_active: bool
    created_at: datetime | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "email": "teacher@example.com",
                "full_name": "Maria Lopez",
                "roles": ["teacher"],
                "is_active": True,
                "created_at": "2024-01-15T10:30:00Z",
            },
        },
    )


class AuthResponse(BaseModel):
    """Response schema for successful authentication."""

    account: AccountResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
