"""Roster Auth - Generic authentication infrastructure.

This package provides authentication building blocks that are independent
of any specific application domain. It handles:
- Password hashing (bcrypt)
- JWT session token creation and verification

Architecture:
    roster_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Token exceptions

Usage:
    from roster_auth import PasswordHashingService, JWTService
"""

from roster_auth.exceptions import (
    AuthError,
    InvalidSignatureError,
    InvalidTokenError,
    TokenExpiredError,
)
from roster_auth.schemas import TokenPayload
from roster_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "InvalidSignatureError",
    "TokenExpiredError",
]
