"""Grade entity, owned by a Student aggregate."""

from uuid import UUID, uuid4

from roster.domain.students.value_objects import GradeInput


class Grade:
    """A single grade entry for one subject.

    Grades only exist as part of their owning Student; they are never
    saved or loaded on their own.
    """

    def __init__(self, subject: str, value: float, id: UUID | None = None):
        self._id = id or uuid4()
        self._subject = subject
        self._value = float(value)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def value(self) -> float:
        return self._value

    @classmethod
    def from_input(cls, grade_input: GradeInput) -> "Grade":
        return cls(subject=grade_input.subject, value=grade_input.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Grade(id={self._id}, subject={self._subject!r}, value={self._value})"
