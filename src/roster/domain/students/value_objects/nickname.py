"""Nickname derivation for student records."""

from typing import Optional


def derive_nickname(name: str, age: Optional[int]) -> str:
    """Derive a student's nickname from name and age.

    Lowercases the name, joins whitespace-separated parts with
    underscores and appends the age when known.

    >>> derive_nickname("Juan Perez", 20)
    'juan_perez20'
    >>> derive_nickname("  Ana  ", None)
    'ana'
    """
    base = "_".join(name.lower().split())
    if age is None:
        return base
    return f"{base}{age}"
