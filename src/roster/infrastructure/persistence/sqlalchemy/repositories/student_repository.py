"""SQLAlchemy implementation of StudentRepository.

Every write runs in its own transaction scope on the injected session:
the scope commits on success and rolls back on any failure, so a student
and its grades are always changed together or not at all.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping, Sequence
from contextlib import asynccontextmanager
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import set_committed_value

from roster.domain.shared.exceptions import DomainException
from roster.domain.shared.time import ensure_tz_aware
from roster.domain.students import (
    Grade,
    GradeInput,
    Student,
    StudentEmailAlreadyExistsError,
    StudentNotFoundError,
    StudentRepository,
    TransactionFailedError,
)
from roster.infrastructure.persistence.sqlalchemy.models import (
    GradeModel,
    StudentModel,
)

logger = logging.getLogger(__name__)

# SQLite reports the column, PostgreSQL the unique index name
_EMAIL_CONSTRAINT_MARKERS = ("students.email", "ix_students_email")


def _is_email_violation(error: IntegrityError) -> bool:
    message = str(error.orig)
    return any(marker in message for marker in _EMAIL_CONSTRAINT_MARKERS)


class StudentRepositorySQLAlchemy(StudentRepository):
    """SQLAlchemy implementation of the student record repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, student: Student) -> Student:
        student.normalize()

        async with self._transaction(student.id, email=student.email):
            model = self._map_to_model(student)
            self._session.add(model)
            await self._session.flush()

        logger.info("Student created: %s (ID: %s)", student.nickname, student.id)
        return await self._reload(student.id)

    async def find_by_id(self, student_id: UUID) -> Optional[Student]:
        model = await self._find_model_by_id(student_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def update(
        self,
        student_id: UUID,
        changes: Mapping[str, Any],
        grades: Optional[Sequence[GradeInput]] = None,
    ) -> Student:
        async with self._transaction(student_id, email=changes.get("email")):
            model = await self._find_model_by_id(student_id, refresh=True)
            if model is None:
                raise StudentNotFoundError(student_id)

            student = self._map_to_domain(model)
            student.apply_changes(changes)

            if grades is not None:
                await self._delete_grades(student_id)
                set_committed_value(model, "grades", [])
                student.replace_grades(grades)

            self._update_model(model, student)
            if grades is not None:
                self._insert_grades(model, student.grades)
            await self._session.flush()

        logger.info(
            "Student updated: %s (fields: %s, grades replaced: %s)",
            student_id,
            sorted(changes),
            grades is not None,
        )
        return await self._reload(student_id)

    async def remove(self, student_id: UUID) -> None:
        async with self._transaction(student_id):
            model = await self._find_model_by_id(student_id, refresh=True)
            if model is None:
                raise StudentNotFoundError(student_id)

            # Cascade removes the grade rows ahead of the student row
            await self._session.delete(model)
            await self._session.flush()

        logger.info("Student removed: %s", student_id)

    async def delete_all(self) -> int:
        async with self._transaction("all"):
            await self._session.execute(delete(GradeModel))
            result = await self._session.execute(delete(StudentModel))

        count = result.rowcount or 0
        logger.info("Deleted all student records: %d", count)
        return count

    @asynccontextmanager
    async def _transaction(
        self,
        student_id: UUID | str,
        email: Optional[str] = None,
    ) -> AsyncIterator[None]:
        try:
            yield
            await self._session.commit()
        except DomainException:
            await self._session.rollback()
            raise
        except IntegrityError as e:
            await self._session.rollback()
            if not _is_email_violation(e):
                logger.exception("Constraint violated writing student %s", student_id)
                raise TransactionFailedError(student_id, reason=str(e.orig)) from e

            logger.warning(
                "Email already taken for student %s: %s",
                student_id,
                e.orig,
            )
            raise StudentEmailAlreadyExistsError(email or "", reason=str(e.orig)) from e
        except Exception as e:
            await self._session.rollback()
            logger.exception("Write for student %s rolled back", student_id)
            raise TransactionFailedError(student_id, reason=repr(e)) from e

    async def _delete_grades(self, student_id: UUID) -> None:
        # Every row of the student, including rows committed after the load
        await self._session.execute(
            delete(GradeModel).where(GradeModel.student_id == student_id)
        )

    def _insert_grades(
        self,
        model: StudentModel,
        grades: Sequence[Grade],
    ) -> None:
        for position, grade in enumerate(grades):
            model.grades.append(self._map_grade_to_model(grade, model.id, position))

    async def _find_model_by_id(
        self,
        student_id: UUID,
        refresh: bool = False,
    ) -> Optional[StudentModel]:
        stmt = select(StudentModel).where(StudentModel.id == student_id)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _reload(self, student_id: UUID) -> Student:
        model = await self._find_model_by_id(student_id, refresh=True)
        if model is None:
            raise StudentNotFoundError(student_id)
        return self._map_to_domain(model)

    def _map_to_domain(self, model: StudentModel) -> Student:
        return Student.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            gender=model.gender,
            subjects=list(model.subjects or []),
            age=model.age,
            nickname=model.nickname,
            grades=[
                Grade(id=g.id, subject=g.subject, value=g.value) for g in model.grades
            ],
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, student: Student) -> StudentModel:
        model = StudentModel(
            id=student.id,
            name=student.name,
            age=student.age,
            email=student.email,
            nickname=student.nickname,
            gender=student.gender.value,
            subjects=student.subjects,
            created_at=student.created_at,
            updated_at=student.updated_at,
        )
        for position, grade in enumerate(student.grades):
            model.grades.append(self._map_grade_to_model(grade, student.id, position))
        return model

    def _map_grade_to_model(
        self,
        grade: Grade,
        student_id: UUID,
        position: int,
    ) -> GradeModel:
        return GradeModel(
            id=grade.id,
            student_id=student_id,
            subject=grade.subject,
            value=grade.value,
            position=position,
        )

    def _update_model(self, model: StudentModel, student: Student) -> None:
        model.name = student.name
        model.age = student.age
        model.email = student.email
        model.nickname = student.nickname
        model.gender = student.gender.value
        model.subjects = student.subjects
        model.updated_at = student.updated_at
