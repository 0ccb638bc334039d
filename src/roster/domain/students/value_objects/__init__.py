"""Value objects for the student domain."""

from roster.domain.students.value_objects.gender import Gender
from roster.domain.students.value_objects.grade_input import GradeInput
from roster.domain.students.value_objects.nickname import derive_nickname

__all__ = [
    "Gender",
    "GradeInput",
    "derive_nickname",
]
