"""Errors raised by the credential services.

The application layer lets them propagate; the API turns them into
401/403/400 responses.
"""


class AuthError(Exception):
    """Common base; ``message`` is safe to show to the client."""

    default_message = "Authentication error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    default_message = "Invalid or expired token"


class WeakPasswordError(AuthError):
    """Password too short, too long or empty."""

    default_message = "Password does not meet requirements"


class InvalidCredentialsError(AuthError):
    """Login failed.

    Unknown email and wrong password share this message.
    """

    default_message = "Wrong email or password"


class AccountLockedError(AuthError):
    """Too many recent failed logins for the email."""

    default_message = "Too many failed login attempts. Try again later."

    def __init__(self, message: str | None = None, failed_attempts: int | None = None):
        self.failed_attempts = failed_attempts
        super().__init__(message)
