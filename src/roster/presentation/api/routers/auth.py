"""Authentication router for account registration, login, and identity."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from roster.presentation.api.config import get_api_settings
from roster.presentation.api.dependencies import (
    AuthService,
    CurrentAccount,
    DBSession,
)
from roster.presentation.api.schemas.auth import (
    AccountResponse,
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)
from roster_config.settings import Settings
from roster_identity import Account, AccountContext

logger = logging.getLogger(__name__)

router = APIRouter()

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def _account_to_response(account: Account | AccountContext) -> AccountResponse:
    if isinstance(account, AccountContext):
        return AccountResponse(
            id=account.account_id,
            email=account.email,
            full_name=account.full_name,
            roles=sorted(account.roles),
            is_active=account.is_active,
        )
    return AccountResponse(
        id=account.id,
        email=account.email,
        full_name=account.full_name,
        roles=sorted(account.roles),
        is_active=account.is_active,
        created_at=account.created_at,
    )


def _create_auth_response(
    account: Account,
    access_token: str,
    settings: Settings,
) -> AuthResponse:
    return AuthResponse(
        account=_account_to_response(account),
        access_token=access_token,
        expires_in=settings.jwt_token_expire_hours * 3600,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
    responses={
        201: {"description": "Account registered successfully"},
        409: {"description": "Email already registered"},
        422: {"description": "Invalid input"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Register a new account and return a session token.

    New accounts hold the `teacher` role.
    """
    account, access_token = await auth_service.register(
        email=request.email,
        full_name=request.full_name,
        password=request.password,
    )
    await session.commit()

    return _create_auth_response(account, access_token, settings)


@router.post(
    "/login",
    summary="Authenticate an account",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
        404: {"description": "No account with this email"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> AuthResponse:
    """Authenticate with email and password and return a session token."""
    account, access_token = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    return _create_auth_response(account, access_token, settings)


@router.get(
    "/me",
    summary="Get the current account",
    responses={
        200: {"description": "Current account"},
        401: {"description": "Not authenticated"},
    },
)
async def me(current: CurrentAccount) -> AccountResponse:
    return _account_to_response(current)
