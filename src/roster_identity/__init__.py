"""Roster Identity - Accounts, authentication and access control.

This module handles all identity-related concerns:
- Account management (roles, activation)
- Authentication (registration, login, session tokens)
- Authorization (route-level role sets)

The student records domain only ever sees an AccountContext, keeping
identity concerns separated.
"""

from roster_identity.application.context import AccountContext
from roster_identity.application.services import (
    AccessPolicy,
    AuthenticationService,
)
from roster_identity.domain.account import (
    DEFAULT_ROLES,
    Account,
    AccountNotFoundError,
    AccountRepository,
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    Role,
)
from roster_identity.exceptions import (
    ForbiddenError,
    InvalidCredentialsError,
    NotAuthenticatedError,
)

__all__ = [
    # Domain - Account
    "DEFAULT_ROLES",
    "Account",
    "AccountNotFoundError",
    "AccountRepository",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "Role",
    # Exceptions
    "ForbiddenError",
    "InvalidCredentialsError",
    "NotAuthenticatedError",
    # Application Context
    "AccountContext",
    # Application Services
    "AccessPolicy",
    "AuthenticationService",
]
