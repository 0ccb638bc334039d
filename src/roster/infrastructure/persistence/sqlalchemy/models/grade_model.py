"""SQLAlchemy model for grade entries."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roster.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from roster.infrastructure.persistence.sqlalchemy.models.student_model import (
        StudentModel,
    )


class GradeModel(Base, TimestampMixin):
    """Database model for a student's grade in one subject."""

    __tablename__ = "grades"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    student_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[float] = mapped_column(Float, nullable=False)

    # Order in which the grades were supplied
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    student: Mapped[StudentModel] = relationship(
        "StudentModel",
        back_populates="grades",
    )

    def __repr__(self) -> str:
        return f"<GradeModel(id={self.id}, subject={self.subject}, value={self.value})>"
