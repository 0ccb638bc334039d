"""Student record schemas for request/response models."""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from roster.domain.students import Gender, GradeInput, Student


class GradeRequest(BaseModel):
    """A grade as sent by the client."""

    subject: str = Field(..., min_length=1, max_length=255)
    grade: float

    model_config = ConfigDict(extra="forbid")

    def to_input(self) -> GradeInput:
        return GradeInput(subject=self.subject, value=self.grade)


class CreateStudentRequest(BaseModel):
    """Request schema for creating a student record.

    The nickname is derived server-side and cannot be supplied.
    """

    name: str = Field(..., min_length=1, max_length=255)
    age: Optional[int] = Field(None, gt=0)
    email: EmailStr
    gender: Gender
    subjects: list[str] = Field(default_factory=list)
    grades: list[GradeRequest] = Field(default_factory=list)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Juan Perez",
                "age": 20,
                "email": "juan@example.com",
                "gender": "Male",
                "subjects": ["Math", "History"],
                "grades": [{"subject": "Math", "grade": 9.5}],
            },
        },
    )


class UpdateStudentRequest(BaseModel):
    """Request schema for a partial student update.

    Only fields present in the body are changed. ``grades``, when present,
    replaces the complete set of grades (``[]`` removes them all).
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    age: Optional[int] = Field(None, gt=0)
    email: Optional[EmailStr] = None
    gender: Optional[Gender] = None
    subjects: Optional[list[str]] = None
    grades: Optional[list[GradeRequest]] = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _only_age_may_be_null(self) -> "UpdateStudentRequest":
        nulled = [
            field
            for field in self.model_fields_set
            if field != "age" and getattr(self, field) is None
        ]
        if nulled:
            msg = f"Fields cannot be null: {', '.join(sorted(nulled))}"
            raise ValueError(msg)
        return self

    def changes(self) -> dict[str, Any]:
        """Field changes to merge, excluding grades."""
        return {
            field: getattr(self, field)
            for field in self.model_fields_set
            if field != "grades"
        }

    def grade_inputs(self) -> Optional[list[GradeInput]]:
        if "grades" not in self.model_fields_set:
            return None
        return [g.to_input() for g in self.grades or []]


class GradeResponse(BaseModel):
    id: UUID
    subject: str
    grade: float


class StudentResponse(BaseModel):
    """Response schema for a student record with its grades."""

    id: UUID
    name: str
    age: Optional[int]
    email: str
    nickname: str
    gender: Gender
    subjects: list[str]
    grades: list[GradeResponse]

    @classmethod
    def from_domain(cls, student: Student) -> "StudentResponse":
        return cls(
            id=student.id,
            name=student.name,
            age=student.age,
            email=student.email,
            nickname=student.nickname,
            gender=student.gender,
            subjects=student.subjects,
            grades=[
                GradeResponse(id=g.id, subject=g.subject, grade=g.value)
                for g in student.grades
            ],
        )
