"""SQLAlchemy model for student records."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import JSON, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roster.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from roster.infrastructure.persistence.sqlalchemy.models.grade_model import (
        GradeModel,
    )


class StudentModel(Base, TimestampMixin):
    """Database model for student records."""

    __tablename__ = "students"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    nickname: Mapped[str] = mapped_column(String(255), nullable=False)
    gender: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="Male, Female or Other",
    )

    # Ordered, duplicates allowed
    subjects: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    grades: Mapped[list[GradeModel]] = relationship(
        "GradeModel",
        back_populates="student",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="GradeModel.position",
    )

    def __repr__(self) -> str:
        return f"<StudentModel(id={self.id}, nickname={self.nickname})>"
