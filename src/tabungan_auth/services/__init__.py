"""Authentication services.

Provides password hashing, session tokens and failed-login tracking.
"""

from tabungan_auth.services.jwt_service import JWTService
from tabungan_auth.services.login_attempt_tracker import (
    AttemptRecord,
    LoginAttemptTracker,
    LoginThrottlePolicy,
)
from tabungan_auth.services.password_service import PasswordHashingService

__all__ = [
    "AttemptRecord",
    "JWTService",
    "LoginAttemptTracker",
    "LoginThrottlePolicy",
    "PasswordHashingService",
]
