"""SQLAlchemy models for persistence layer."""

from roster.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from roster.infrastructure.persistence.sqlalchemy.models.grade_model import GradeModel
from roster.infrastructure.persistence.sqlalchemy.models.student_model import (
    StudentModel,
)

__all__ = [
    "Base",
    "GradeModel",
    "StudentModel",
    "TimestampMixin",
]
