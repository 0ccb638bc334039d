"""Student aggregate root."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Optional, Union
from uuid import UUID, uuid4

from roster.domain.shared.exceptions import ValidationError
from roster.domain.shared.time import utc_now
from roster.domain.students.entities import Grade
from roster.domain.students.value_objects import Gender, GradeInput, derive_nickname


class Student:
    """
    Student record aggregate root.

    Owns its grade entries: grades are created through ``create`` or
    ``replace_grades`` and never outlive the student. The nickname is
    derived from name and age and is never set by callers.
    """

    MUTABLE_FIELDS = frozenset({"name", "age", "email", "gender", "subjects"})

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        email: str,
        gender: Union[str, Gender],
        subjects: Iterable[str] = (),
        age: Optional[int] = None,
        grades: Iterable[Grade] = (),
        nickname: Optional[str] = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = self._validate_name(name)
        self._age = self._validate_age(age)
        self._email = email
        self._gender = gender if isinstance(gender, Gender) else Gender(gender)
        self._subjects = list(subjects)
        self._grades = list(grades)
        self._nickname = nickname or derive_nickname(self._name, self._age)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> Optional[int]:
        return self._age

    @property
    def email(self) -> str:
        return self._email

    @property
    def nickname(self) -> str:
        return self._nickname

    @property
    def gender(self) -> Gender:
        return self._gender

    @property
    def subjects(self) -> list[str]:
        return list(self._subjects)

    @property
    def grades(self) -> list[Grade]:
        return list(self._grades)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        name: str,
        email: str,
        gender: Union[str, Gender],
        subjects: Iterable[str] = (),
        age: Optional[int] = None,
        grades: Iterable[GradeInput] = (),
    ) -> "Student":
        return cls(
            name=name,
            email=email,
            gender=gender,
            subjects=subjects,
            age=age,
            grades=[Grade.from_input(g) for g in grades],
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        email: str,
        gender: Union[str, Gender],
        subjects: Iterable[str],
        age: Optional[int],
        nickname: str,
        grades: Iterable[Grade],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Student":
        return cls(
            id=id,
            name=name,
            email=email,
            gender=gender,
            subjects=subjects,
            age=age,
            nickname=nickname,
            grades=grades,
            created_at=created_at,
            updated_at=updated_at,
        )

    def apply_changes(self, changes: Mapping[str, Any]) -> None:
        """Merge a partial set of field changes into the record.

        Only the keys present in ``changes`` are touched. ``age`` may be
        set to ``None`` to clear it; the nickname is recomputed afterwards.

        Parameters
        ----------
        changes
            Mapping of field name to new value.

        Raises
        ------
        ValidationError
            If ``changes`` names a field that cannot be updated, or a new
            name or age is invalid.
        """
        unknown = set(changes) - self.MUTABLE_FIELDS
        if unknown:
            msg = f"Cannot update fields: {', '.join(sorted(unknown))}"
            raise ValidationError(msg, details={"fields": sorted(unknown)})

        if "name" in changes:
            self._name = self._validate_name(changes["name"])
        if "age" in changes:
            self._age = self._validate_age(changes["age"])
        if "email" in changes:
            self._email = changes["email"]
        if "gender" in changes:
            gender = changes["gender"]
            self._gender = gender if isinstance(gender, Gender) else Gender(gender)
        if "subjects" in changes:
            self._subjects = list(changes["subjects"])

        self.normalize()
        self._touch()

    def replace_grades(self, grades: Iterable[GradeInput]) -> None:
        """Discard every current grade and attach fresh ones."""
        self._grades = [Grade.from_input(g) for g in grades]
        self._touch()

    def normalize(self) -> None:
        """Recompute derived fields. Called right before every write."""
        self._nickname = derive_nickname(self._name, self._age)

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @staticmethod
    def _validate_name(name: str) -> str:
        if not name or not name.strip():
            msg = "Student name cannot be empty"
            raise ValidationError(msg)
        return name

    @staticmethod
    def _validate_age(age: Optional[int]) -> Optional[int]:
        if age is not None and age <= 0:
            msg = "Student age must be a positive integer"
            raise ValidationError(msg, details={"age": age})
        return age

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Student(id={self._id}, nickname={self._nickname!r})"
