"""Tabungan Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the account and banking domains. It handles:
- Password hashing (bcrypt)
- Session token creation and verification (JWT)
- Failed-login tracking and lockout

Architecture:
    tabungan_auth/
    ├── services/           # Password hashing, JWT, attempt tracking
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from tabungan_auth import (
        JWTService,
        LoginAttemptTracker,
        PasswordHashingService,
    )
"""

from tabungan_auth.exceptions import (
    AccountLockedError,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from tabungan_auth.schemas import TokenPayload
from tabungan_auth.services import (
    AttemptRecord,
    JWTService,
    LoginAttemptTracker,
    LoginThrottlePolicy,
    PasswordHashingService,
)

__all__ = [
    # Services
    "AttemptRecord",
    "JWTService",
    "LoginAttemptTracker",
    "LoginThrottlePolicy",
    "PasswordHashingService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AccountLockedError",
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "WeakPasswordError",
]
