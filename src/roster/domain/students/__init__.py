"""Student domain - student records and their grades.

This domain handles:
- Student aggregate (profile fields, derived nickname)
- Grade entities owned by a student
- Whole-collection grade replacement on update

Design notes:
- Student ID is a random UUID4 generated at creation
- The nickname is always derived from name and age, never supplied
- Grades have no lifecycle of their own; they go with their student
- Repository interface defined here, implementation in infrastructure
"""

from roster.domain.students.aggregates import Student
from roster.domain.students.entities import Grade
from roster.domain.students.exceptions import (
    StudentEmailAlreadyExistsError,
    StudentNotFoundError,
    TransactionFailedError,
)
from roster.domain.students.repositories import StudentRepository
from roster.domain.students.value_objects import Gender, GradeInput, derive_nickname

__all__ = [
    "Gender",
    "Grade",
    "GradeInput",
    "Student",
    "StudentEmailAlreadyExistsError",
    "StudentNotFoundError",
    "StudentRepository",
    "TransactionFailedError",
    "derive_nickname",
]
