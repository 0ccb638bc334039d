"""Access policy: who may call a route.

Two gates run per guarded request. The authentication gate turns a bearer
token into an ``AccountContext``; the role gate checks that context
against the route's permitted role set.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

from roster_auth import InvalidTokenError
from roster_identity.application.context import AccountContext
from roster_identity.exceptions import ForbiddenError, NotAuthenticatedError

if TYPE_CHECKING:
    from roster_auth import JWTService
    from roster_identity.domain.account import AccountRepository

logger = logging.getLogger(__name__)


class AccessPolicy:
    """Authentication and role gates for guarded routes."""

    def __init__(
        self,
        account_repository: AccountRepository,
        jwt_service: JWTService,
    ):
        self._account_repo = account_repository
        self._jwt_service = jwt_service

    async def authenticate(self, token: Optional[str]) -> AccountContext:
        """
        Resolve a bearer token to the account it was issued for.

        Parameters
        ----------
        token
            Raw bearer token, or ``None`` when the request had none

        Returns
        -------
        Context of the active account the token belongs to

        Raises
        ------
        NotAuthenticatedError
            If the token is missing, fails verification, or names an
            account that no longer exists or is inactive
        """
        if not token:
            raise NotAuthenticatedError

        try:
            payload = self._jwt_service.verify_token(token)
        except InvalidTokenError as e:
            logger.warning("Rejected token: %s", e)
            raise NotAuthenticatedError(details={"reason": str(e)}) from e

        account = await self._account_repo.find_by_id(payload.account_id)
        if account is None:
            logger.warning("Token for unknown account: %s", payload.account_id)
            raise NotAuthenticatedError(details={"reason": "unknown account"})

        if not account.is_active:
            logger.warning("Token for inactive account: %s", account.id)
            raise NotAuthenticatedError(details={"reason": "inactive account"})

        return AccountContext.create(account)

    @staticmethod
    def authorize(context: AccountContext, permitted_roles: Iterable[str]) -> None:
        """Raise ForbiddenError unless the account holds a permitted role.

        An empty permitted set lets every authenticated account through.
        """
        permitted = frozenset(permitted_roles)
        if not permitted:
            return

        if context.roles.isdisjoint(permitted):
            raise ForbiddenError(
                details={
                    "account_id": str(context.account_id),
                    "permitted_roles": sorted(permitted),
                },
            )

    async def check(
        self,
        token: Optional[str],
        permitted_roles: Iterable[str] = (),
    ) -> AccountContext:
        context = await self.authenticate(token)
        self.authorize(context, permitted_roles)
        return context
