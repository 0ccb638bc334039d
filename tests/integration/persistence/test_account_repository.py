"""Integration tests for AccountRepositorySQLAlchemy."""

import pytest

from roster_identity import (
    Account,
    AccountNotFoundError,
    EmailAlreadyExistsError,
    Role,
)
from roster_identity.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
)


def _account(email: str = "teacher@example.com") -> Account:
    return Account.create(email, "Maria Lopez", "$2b$04$storedhash")


class TestAccountRepository:
    @pytest.mark.asyncio
    async def test_create_and_find_by_id_without_secret(
        self,
        test_db_session,
        test_session_maker,
    ):
        repo = AccountRepositorySQLAlchemy(test_db_session)
        created = await repo.create(_account())
        await test_db_session.commit()

        async with test_session_maker() as session:
            found = await AccountRepositorySQLAlchemy(session).find_by_id(created.id)

        assert found is not None
        assert found.email == "teacher@example.com"
        assert found.roles == frozenset({"teacher"})
        assert found.is_active is True
        assert found.password_hash is None

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(
        self,
        test_db_session,
        test_session_maker,
    ):
        await AccountRepositorySQLAlchemy(test_db_session).create(_account())
        await test_db_session.commit()

        async with test_session_maker() as session:
            found = await AccountRepositorySQLAlchemy(session).find_by_email(
                " Teacher@EXAMPLE.com",
            )

        assert found is not None
        assert found.password_hash is None

    @pytest.mark.asyncio
    async def test_find_by_email_with_secret_loads_hash(
        self,
        test_db_session,
        test_session_maker,
    ):
        await AccountRepositorySQLAlchemy(test_db_session).create(_account())
        await test_db_session.commit()

        async with test_session_maker() as session:
            repo = AccountRepositorySQLAlchemy(session)
            # Plain lookup first, so the row is already in the identity map
            await repo.find_by_email("teacher@example.com")
            found = await repo.find_by_email_with_secret("teacher@example.com")

        assert found.password_hash == "$2b$04$storedhash"

    @pytest.mark.asyncio
    async def test_unknown_email_returns_none(self, test_db_session):
        repo = AccountRepositorySQLAlchemy(test_db_session)

        assert await repo.find_by_email("nobody@example.com") is None
        assert await repo.find_by_email_with_secret("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_duplicate_email_differing_in_case_is_rejected(
        self,
        test_db_session,
    ):
        repo = AccountRepositorySQLAlchemy(test_db_session)
        await repo.create(_account())
        await test_db_session.commit()

        with pytest.raises(EmailAlreadyExistsError):
            await repo.create(_account("TEACHER@example.com "))

    @pytest.mark.asyncio
    async def test_save_persists_roles_and_active_flag(
        self,
        test_db_session,
        test_session_maker,
    ):
        repo = AccountRepositorySQLAlchemy(test_db_session)
        account = await repo.create(_account())
        await test_db_session.commit()

        account.grant_role(Role.ADMIN)
        account.deactivate()
        await repo.save(account)
        await test_db_session.commit()

        async with test_session_maker() as session:
            found = await AccountRepositorySQLAlchemy(session).find_by_id(account.id)

        assert found.roles == frozenset({"admin", "teacher"})
        assert found.is_active is False

    @pytest.mark.asyncio
    async def test_save_unknown_account_raises(self, test_db_session):
        repo = AccountRepositorySQLAlchemy(test_db_session)

        with pytest.raises(AccountNotFoundError):
            await repo.save(_account())
