"""SQLAlchemy implementation for roster_identity persistence.

Provides:
- AccountModel: SQLAlchemy model for accounts (shares roster's Base metadata)
- AccountRepositorySQLAlchemy: Repository implementation for accounts
"""

from roster_identity.infrastructure.persistence.sqlalchemy.models import AccountModel
from roster_identity.infrastructure.persistence.sqlalchemy.repositories import (
    AccountRepositorySQLAlchemy,
)

__all__ = [
    "AccountModel",
    "AccountRepositorySQLAlchemy",
]
