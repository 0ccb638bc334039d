"""Map domain exceptions to JSON error responses.

Every error body has the same shape::

    {"detail": "<message safe for clients>", "code": "<ErrorCode value>"}

``DomainException.details`` goes to the log only.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from roster.domain.shared.exceptions import DomainException, ErrorCode

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STUDENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorCode.TRANSACTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Challenge header required alongside 401 for bearer auth
_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def _get_status_for_exception(exc: DomainException) -> int:
    return ERROR_CODE_TO_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST)


def _error_response(
    status_code: int,
    message: str,
    code: ErrorCode,
) -> JSONResponse:
    headers = (
        _BEARER_CHALLENGE if status_code == status.HTTP_401_UNAUTHORIZED else None
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code.value},
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the domain and catch-all exception handlers on ``app``.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = _get_status_for_exception(exc)

        log = logger.error if status_code >= 500 else logger.warning
        log(
            "%s %s -> %d %s: %s %s",
            request.method,
            request.url.path,
            status_code,
            exc.code.value,
            exc.message,
            exc.details,
        )
        return _error_response(status_code, exc.message, exc.code)

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )
