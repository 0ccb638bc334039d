"""Pytest fixtures for API integration tests."""

from collections.abc import Callable

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr

from roster.presentation.api.app import API_V1_PREFIX, create_app
from roster.presentation.api.config import get_api_settings
from roster.presentation.api.dependencies import get_db_session
from roster_config.settings import Settings
from roster_identity import Account
from roster_identity.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
)

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled and a cheap bcrypt work factor."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url_override="sqlite+aiosqlite:///:memory:",
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        bcrypt_rounds=4,
    )


@pytest.fixture
def test_app(api_settings, test_session_maker):
    """Create the app wired to the in-memory database."""
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    return app


@pytest.fixture
async def client(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def register(client, api_v1_prefix):
    """Register an account and return its Authorization header."""

    async def _register(email: str = "teacher@example.com") -> dict[str, str]:
        response = await client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": email, "full_name": "Test Teacher", "password": "Abc123"},
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _register


@pytest.fixture
def change_account(test_session_maker):
    """Apply a change to a stored account, the way the admin CLI does."""

    async def _change(email: str, change: Callable[[Account], None]) -> None:
        async with test_session_maker() as session:
            repo = AccountRepositorySQLAlchemy(session)
            account = await repo.find_by_email(email)
            change(account)
            await repo.save(account)
            await session.commit()

    return _change
