"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/               # Fast, isolated tests (no database)
    │   ├── roster/
    │   ├── roster_auth/
    │   └── roster_identity/
    └── integration/        # In-memory SQLite via aiosqlite
        ├── persistence/    # Repository tests
        └── api/            # HTTP tests against the FastAPI app

The settings below are applied before any application module is imported,
so importing the API module never needs a real secret or database.
"""

import os

import pytest

os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from roster_config import clear_settings_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Reload settings for every test so env changes never leak."""
    clear_settings_cache()
    yield
    clear_settings_cache()
