"""Domain exception hierarchy and the error codes exposed by the API.

Every failure a caller can act on is a ``DomainException`` subclass with a
fixed ``ErrorCode``. The presentation layer maps codes to HTTP statuses in
one place; nothing below it knows about HTTP.
"""

from enum import Enum
from typing import Any, ClassVar, Optional


class ErrorCode(str, Enum):
    """Codes returned in the ``code`` field of error responses.

    Clients branch on these, so existing values must not change.
    """

    # Bad input (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_SORT = "INVALID_SORT"
    INVALID_QUERY_FIELD = "INVALID_QUERY_FIELD"
    PASSWORD_CONFIRMATION_MISMATCH = "PASSWORD_CONFIRMATION_MISMATCH"

    # Credentials (401 / 403)
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    INVALID_TOKEN = "INVALID_TOKEN"
    EMAIL_MISMATCH = "EMAIL_MISMATCH"
    ACCOUNT_LOCKED = "ACCOUNT_LOCKED"

    # Unknown ids (422)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"

    # Uniqueness (409)
    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_TAKEN = "EMAIL_ALREADY_TAKEN"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base of all domain failures.

    Attributes
    ----------
    message
        Text shown to the end user as is
    code
        Stable ``ErrorCode``; defaults to the category's ``default_code``
    details
        Extra context for logs, never sent to the client
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"code={self.code.value!r}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input is well-formed JSON but not acceptable."""

    default_code = ErrorCode.VALIDATION_ERROR


class AuthorizationFailed(DomainException):  # NOQA: N818
    """Supplied credentials do not authorise the operation."""

    default_code = ErrorCode.INVALID_CREDENTIALS


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The operation would violate a uniqueness rule."""

    default_code = ErrorCode.CONFLICT
