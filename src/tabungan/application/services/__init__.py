"""Application layer services."""

from tabungan.application.services.authentication_service import (
    AuthenticationService,
    LoginResult,
)
from tabungan.application.services.keyed_lock import KeyedLock
from tabungan.application.services.ledger_service import LedgerService

__all__ = [
    "AuthenticationService",
    "KeyedLock",
    "LedgerService",
    "LoginResult",
]
