"""Grade input value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GradeInput:
    """A grade as supplied by the caller, before it becomes a Grade entity."""

    subject: str
    value: float
