"""FastAPI dependency injection for the Roster API.

Provides dependencies for:
- Database sessions
- Authentication and role checks (account context from JWT)
- Service and repository instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from roster.infrastructure.persistence.sqlalchemy.models import Base
from roster.infrastructure.persistence.sqlalchemy.repositories import (
    StudentRepositorySQLAlchemy,
)
from roster.presentation.api.config import get_api_settings
from roster_auth import JWTService, PasswordHashingService
from roster_config.settings import Settings, get_settings
from roster_identity import (
    AccessPolicy,
    AccountContext,
    AuthenticationService,
    Role,
)
from roster_identity.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    The session is closed, and its connection returned to the pool, when
    the request finishes on every path.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables() -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    engine = get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        token_expire_hours=settings.jwt_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Get authentication service with all dependencies."""
    return AuthenticationService(
        account_repository=AccountRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_access_policy(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AccessPolicy:
    return AccessPolicy(
        account_repository=AccountRepositorySQLAlchemy(session),
        jwt_service=jwt_service,
    )


# -----------------------------------------------------------------------------
# Current Account (JWT Authentication + Role Gate)
# -----------------------------------------------------------------------------


class RequireRoles:
    """
    Route guard carrying the set of roles permitted to call a route.

    Used as a dependency: resolves the bearer token to the calling
    account, then checks the account's roles against the permitted set.
    With no roles given, any authenticated account passes.

    Examples
    --------
    >>> StaffOnly = Annotated[AccountContext, Depends(RequireRoles("admin"))]
    """

    def __init__(self, *roles: str | Role):
        self.permitted_roles = frozenset(
            r.value if isinstance(r, Role) else r for r in roles
        )

    async def __call__(
        self,
        policy: AccessPolicy = Depends(get_access_policy),
        credentials: HTTPAuthorizationCredentials | None = Depends(security),
    ) -> AccountContext:
        token = credentials.credentials if credentials else None
        return await policy.check(token, self.permitted_roles)


# Any authenticated, active account
CurrentAccount = Annotated[AccountContext, Depends(RequireRoles())]

# Accounts allowed to change student records
StaffAccount = Annotated[
    AccountContext,
    Depends(RequireRoles(Role.ADMIN, Role.TEACHER)),
]


# -----------------------------------------------------------------------------
# Repositories
# -----------------------------------------------------------------------------


def get_student_repository(session: DBSession) -> StudentRepositorySQLAlchemy:
    return StudentRepositorySQLAlchemy(session)


StudentRepo = Annotated[StudentRepositorySQLAlchemy, Depends(get_student_repository)]
