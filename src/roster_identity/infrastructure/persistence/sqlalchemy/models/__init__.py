"""SQLAlchemy models for identity persistence."""

from roster_identity.infrastructure.persistence.sqlalchemy.models.account_model import (  # NOQA: E501
    AccountModel,
)

__all__ = ["AccountModel"]
