"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from roster_identity.domain.account.aggregates.account import Account
from roster_identity.domain.account.value_objects.email import Email


class AccountRepository(ABC):
    """Repository interface for Account aggregates.

    Only ``find_by_email_with_secret`` returns accounts carrying their
    password hash.
    """

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """
        Insert a new account.

        Parameters
        ----------
        account
            The account to insert, password hash included

        Returns
        -------
        The stored account

        Raises
        ------
        EmailAlreadyExistsError
            If the normalized email is already registered
        """

    @abstractmethod
    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        """Find an account by its ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[Account]:
        """Find an account by its normalized email address."""

    @abstractmethod
    async def find_by_email_with_secret(
        self,
        email: Union[str, Email],
    ) -> Optional[Account]:
        """Find an account by email, loading its password hash."""

    @abstractmethod
    async def save(self, account: Account) -> None:
        """Update name, email, active flag and roles of an existing account."""
