from enum import Enum


class Gender(str, Enum):
    """Gender recorded on a student record."""

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"
