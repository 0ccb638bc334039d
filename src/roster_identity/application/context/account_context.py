"""Account context for request-scoped identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from roster_identity.domain.account import Account


@dataclass(frozen=True)
class AccountContext:
    """Immutable context for the current authenticated account."""

    account_id: UUID
    email: str
    full_name: str
    roles: frozenset[str]
    is_active: bool = True

    @classmethod
    def create(cls, account: Account) -> AccountContext:
        return cls(
            account_id=account.id,
            email=account.email,
            full_name=account.full_name,
            roles=account.roles,
            is_active=account.is_active,
        )

    def __str__(self) -> str:
        return f"AccountContext({self.email})"
