"""SQLAlchemy model for Account aggregate."""

from uuid import UUID

from sqlalchemy import JSON, Boolean, String, Uuid
from sqlalchemy.orm import Mapped, deferred, mapped_column

from roster.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class AccountModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Account aggregates.

    The password hash is deferred: ordinary loads never read it, only
    queries that explicitly undefer the column do.
    """

    __tablename__ = "accounts"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = deferred(mapped_column(String(255), nullable=False))
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    roles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, email={self.email}, active={self.active})>"
