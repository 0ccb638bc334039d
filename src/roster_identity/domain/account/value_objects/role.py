from enum import Enum


class Role(str, Enum):
    """Role tags an account can hold."""

    ADMIN = "admin"
    TEACHER = "teacher"


DEFAULT_ROLES = frozenset({Role.TEACHER.value})
