"""Authentication service for account registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roster_identity.domain.account import (
    Account,
    AccountNotFoundError,
    EmailAlreadyExistsError,
)
from roster_identity.exceptions import InvalidCredentialsError

if TYPE_CHECKING:
    from roster_auth import JWTService, PasswordHashingService
    from roster_identity.domain.account import AccountRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for account authentication.

    Orchestrates roster_auth infrastructure (password hashing, JWT tokens)
    with the Account domain to provide:
    - Account registration
    - Login with password

    Accounts handed back to callers never carry the password hash.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._account_repo = account_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _issue_token(self, account: Account) -> str:
        return self._jwt_service.create_token(
            account_id=account.id,
            email=account.email,
        )

    async def register(
        self,
        email: str,
        full_name: str,
        password: str,
    ) -> tuple[Account, str]:
        existing = await self._account_repo.find_by_email(email)
        if existing is not None:
            raise EmailAlreadyExistsError(existing.email)

        password_hash = self._password_service.hash(password)
        account = Account.create(email, full_name, password_hash)
        account = await self._account_repo.create(account)
        account = account.without_secret()

        logger.info("Account registered: %s", account.email)
        return account, self._issue_token(account)

    async def login(self, email: str, password: str) -> tuple[Account, str]:
        account = await self._account_repo.find_by_email_with_secret(email)
        if account is None:
            raise AccountNotFoundError(email)

        if not account.password_hash or not self._password_service.verify(
            password,
            account.password_hash,
        ):
            raise InvalidCredentialsError

        account = account.without_secret()

        logger.info("Account logged in: %s", account.email)
        return account, self._issue_token(account)
