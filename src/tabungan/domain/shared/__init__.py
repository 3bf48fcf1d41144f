"""Shared domain building blocks."""

from tabungan.domain.shared.exceptions import (
    AuthorizationFailed,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from tabungan.domain.shared.time import as_utc, utc_now

__all__ = [
    "AuthorizationFailed",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
    "as_utc",
    "utc_now",
]
