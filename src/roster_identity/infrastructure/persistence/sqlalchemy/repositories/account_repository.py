"""SQLAlchemy implementation of AccountRepository."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import undefer

from roster.domain.shared.time import ensure_tz_aware
from roster_identity.domain.account import (
    Account,
    AccountNotFoundError,
    AccountRepository,
    Email,
    EmailAlreadyExistsError,
)
from roster_identity.infrastructure.persistence.sqlalchemy.models import AccountModel

logger = logging.getLogger(__name__)


class AccountRepositorySQLAlchemy(AccountRepository):
    """SQLAlchemy implementation of the AccountRepository interface.

    Writes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, account: Account) -> Account:
        if await self._find_model_by_email(account.email) is not None:
            raise EmailAlreadyExistsError(account.email)

        model = self._map_to_model(account)
        try:
            self._session.add(model)
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning("Duplicate account email on insert: %s", account.email)
            raise EmailAlreadyExistsError(account.email) from e

        logger.info("Created account: %s (email: %s)", account.id, account.email)
        return self._map_to_domain(model, include_secret=True)

    async def find_by_id(self, account_id: UUID) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Account | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        model = await self._find_model_by_email(email_value)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email_with_secret(
        self,
        email: Union[str, Email],
    ) -> Account | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        stmt = (
            select(AccountModel)
            .where(AccountModel.email == email_value)
            .options(undefer(AccountModel.password_hash))
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model, include_secret=True)

    async def save(self, account: Account) -> None:
        stmt = select(AccountModel).where(AccountModel.id == account.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise AccountNotFoundError(account.id)

        try:
            self._update_model(model, account)
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise EmailAlreadyExistsError(account.email) from e

        logger.debug("Updated account: %s", account.id)

    async def _find_model_by_email(self, email: str) -> AccountModel | None:
        stmt = select(AccountModel).where(AccountModel.email == email)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(
        self,
        model: AccountModel,
        include_secret: bool = False,
    ) -> Account:
        password_hash = None
        # Reading an unloaded deferred column would trigger lazy IO
        if include_secret and "password_hash" not in inspect(model).unloaded:
            password_hash = model.password_hash

        return Account.reconstitute(
            id=model.id,
            email=model.email,
            full_name=model.full_name,
            active=model.active,
            roles=model.roles or [],
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            password_hash=password_hash,
        )

    def _map_to_model(self, account: Account) -> AccountModel:
        return AccountModel(
            id=account.id,
            email=account.email,
            full_name=account.full_name,
            password_hash=account.password_hash,
            active=account.is_active,
            roles=sorted(account.roles),
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

    def _update_model(self, model: AccountModel, account: Account) -> None:
        model.email = account.email
        model.full_name = account.full_name
        model.active = account.is_active
        model.roles = sorted(account.roles)
        model.updated_at = account.updated_at
