"""SQLAlchemy repository implementations."""

from roster.infrastructure.persistence.sqlalchemy.repositories.student_repository import (  # NOQA: E501
    StudentRepositorySQLAlchemy,
)

__all__ = ["StudentRepositorySQLAlchemy"]
