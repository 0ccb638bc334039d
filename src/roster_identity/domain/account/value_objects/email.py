"""Email value object.

Provides normalized email addresses for account identification. Format
checks happen at the HTTP boundary; here the address is only trimmed and
lowercased so lookups and the unique constraint agree.
"""

from dataclasses import dataclass

from roster_identity.domain.account.exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email:
    """Value object representing a normalized email address."""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()
        if not normalized:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
