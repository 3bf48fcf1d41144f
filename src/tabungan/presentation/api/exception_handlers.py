"""Translate exceptions into ``{"detail": ..., "code": ...}`` responses.

``ERROR_CODE_TO_STATUS`` is the only place where a domain error code is
tied to an HTTP status. Routers raise domain or auth errors and never
build error responses themselves.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tabungan.domain.shared.exceptions import (
    AuthorizationFailed,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)
from tabungan_auth import (
    AccountLockedError,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

_400 = status.HTTP_400_BAD_REQUEST
_401 = status.HTTP_401_UNAUTHORIZED
_403 = status.HTTP_403_FORBIDDEN
_409 = status.HTTP_409_CONFLICT
_422 = status.HTTP_422_UNPROCESSABLE_ENTITY

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: _400,
    ErrorCode.INVALID_SORT: _400,
    ErrorCode.INVALID_QUERY_FIELD: _400,
    ErrorCode.PASSWORD_CONFIRMATION_MISMATCH: _400,
    ErrorCode.INVALID_CREDENTIALS: _401,
    ErrorCode.INVALID_PASSWORD: _401,
    ErrorCode.INVALID_TOKEN: _401,
    ErrorCode.EMAIL_MISMATCH: _403,
    ErrorCode.ACCOUNT_LOCKED: _403,
    ErrorCode.CONFLICT: _409,
    ErrorCode.EMAIL_ALREADY_TAKEN: _409,
    ErrorCode.ENTITY_NOT_FOUND: _422,
    ErrorCode.USER_NOT_FOUND: _422,
    ErrorCode.ACCOUNT_NOT_FOUND: _422,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# checked in order; the first matching class wins
_AUTH_ERROR_RESPONSES: list[tuple[type[AuthError], int, ErrorCode]] = [
    (AccountLockedError, _403, ErrorCode.ACCOUNT_LOCKED),
    (InvalidCredentialsError, _401, ErrorCode.INVALID_CREDENTIALS),
    (InvalidTokenError, _401, ErrorCode.INVALID_TOKEN),
    (WeakPasswordError, _400, ErrorCode.VALIDATION_ERROR),
]


def _get_status_for_exception(exc: DomainException) -> int:
    """Status for ``exc.code``; unmapped codes fall back on the category."""
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    if isinstance(exc, EntityNotFoundError):
        return _422
    if isinstance(exc, ConflictError):
        return _409
    if isinstance(exc, AuthorizationFailed):
        return _401
    return _400


def _get_status_and_code_for_auth_error(exc: AuthError) -> tuple[int, ErrorCode]:
    for error_type, status_code, code in _AUTH_ERROR_RESPONSES:
        if isinstance(exc, error_type):
            return status_code, code
    return _401, ErrorCode.INVALID_CREDENTIALS


def _error_response(status_code: int, message: str, code: ErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code.value},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the domain, auth and catch-all handlers on ``app``."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        logger.warning(
            "%s %s failed: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _error_response(_get_status_for_exception(exc), exc.message, exc.code)

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Log the outcome only, never which credential check failed."""
        status_code, code = _get_status_and_code_for_auth_error(exc)
        logger.info(
            "%s %s rejected (code=%s)",
            request.method,
            request.url.path,
            code.value,
        )
        return _error_response(status_code, exc.message, code)

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Anything unexpected, including store failures, becomes a bare 500."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )
