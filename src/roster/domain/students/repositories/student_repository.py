"""Student repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Optional
from uuid import UUID

from roster.domain.students.aggregates.student import Student
from roster.domain.students.value_objects import GradeInput


class StudentRepository(ABC):
    """Repository interface for Student aggregates.

    Every write runs inside its own transaction scope: it either commits
    completely or leaves the store exactly as it was.
    """

    @abstractmethod
    async def create(self, student: Student) -> Student:
        """
        Persist a new student together with its grades.

        Parameters
        ----------
        student
            A freshly created Student aggregate

        Returns
        -------
        The stored Student, with its derived nickname

        Raises
        ------
        StudentEmailAlreadyExistsError
            If another student already uses the email
        """

    @abstractmethod
    async def find_by_id(self, student_id: UUID) -> Optional[Student]:
        """Find a student by ID, grades included."""

    @abstractmethod
    async def update(
        self,
        student_id: UUID,
        changes: Mapping[str, Any],
        grades: Optional[Sequence[GradeInput]] = None,
    ) -> Student:
        """
        Apply a partial update and optionally replace all grades.

        Parameters
        ----------
        student_id
            The student to update
        changes
            Field changes; only the keys present are applied
        grades
            ``None`` leaves the grades untouched. Any sequence, including
            an empty one, replaces the full set of grades.

        Returns
        -------
        The Student as re-read after commit

        Raises
        ------
        StudentNotFoundError
            If no student has this ID
        StudentEmailAlreadyExistsError
            If the new email collides with another student
        TransactionFailedError
            If the write fails for any other reason; nothing is changed
        """

    @abstractmethod
    async def remove(self, student_id: UUID) -> None:
        """Delete a student and all of its grades."""

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every student and grade. Returns the number of students."""
