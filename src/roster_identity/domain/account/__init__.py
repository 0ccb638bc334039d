"""Account domain - who can sign in and what they may do.

This domain handles:
- Account aggregate (identity, active flag, role set)
- Role tags checked by the access policy

Design notes:
- Account ID is a random UUID4 generated at creation
- Email is normalized (trimmed, lowercased) and unique
- Accounts are deactivated, never deleted
- Repository interface defined here, implementation in infrastructure
"""

from roster_identity.domain.account.exceptions import (
    AccountNotFoundError,
    EmailAlreadyExistsError,
    InvalidEmailError,
)
from roster_identity.domain.account.value_objects import DEFAULT_ROLES, Email, Role
from roster_identity.domain.account.aggregates import Account
from roster_identity.domain.account.repositories import AccountRepository

__all__ = [
    "DEFAULT_ROLES",
    "Account",
    "AccountNotFoundError",
    "AccountRepository",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "Role",
]
