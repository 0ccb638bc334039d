"""Account aggregate for identity concerns."""

from collections.abc import Iterable
from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from roster.domain.shared.time import utc_now
from roster_identity.domain.account.value_objects import DEFAULT_ROLES, Email, Role


class Account:
    """
    Account aggregate root.

    An account can log in and act on student records according to its
    roles. The password hash is carried only when the account was loaded
    for credential checking; every other load leaves it as ``None``.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        full_name: str,
        password_hash: Optional[str] = None,
        active: bool = True,
        roles: Iterable[Union[str, Role]] = DEFAULT_ROLES,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._full_name = full_name
        self._password_hash = password_hash
        self._active = active
        self._roles = {r.value if isinstance(r, Role) else r for r in roles}
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def password_hash(self) -> Optional[str]:
        return self._password_hash

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def roles(self) -> frozenset[str]:
        return frozenset(self._roles)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_any_role(self, roles: Iterable[Union[str, Role]]) -> bool:
        wanted = {r.value if isinstance(r, Role) else r for r in roles}
        return not self._roles.isdisjoint(wanted)

    def grant_role(self, role: Union[str, Role]) -> None:
        self._roles.add(Role(role).value)
        self._updated_at = utc_now()

    def revoke_role(self, role: Union[str, Role]) -> None:
        self._roles.discard(Role(role).value)
        self._updated_at = utc_now()

    def activate(self) -> None:
        self._active = True
        self._updated_at = utc_now()

    def deactivate(self) -> None:
        self._active = False
        self._updated_at = utc_now()

    def without_secret(self) -> "Account":
        """Return a copy of this account with the password hash removed."""
        return Account(
            id=self._id,
            email=self._email,
            full_name=self._full_name,
            password_hash=None,
            active=self._active,
            roles=self._roles,
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        full_name: str,
        password_hash: str,
        roles: Iterable[Union[str, Role]] = DEFAULT_ROLES,
    ) -> "Account":
        return cls(
            email=email,
            full_name=full_name,
            password_hash=password_hash,
            roles=roles,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        full_name: str,
        active: bool,
        roles: Iterable[str],
        created_at: datetime,
        updated_at: datetime,
        password_hash: Optional[str] = None,
    ) -> "Account":
        return cls(
            id=id,
            email=email,
            full_name=full_name,
            password_hash=password_hash,
            active=active,
            roles=roles,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Account(id={self._id}, email={self._email.value})"
