"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tabungan.application.services.keyed_lock import KeyedLock
from tabungan.domain.user import EmailAlreadyExistsError, User, normalize_email
from tabungan_auth import (
    AccountLockedError,
    InvalidCredentialsError,
    JWTService,
    LoginAttemptTracker,
    PasswordHashingService,
    TokenPayload,
)

if TYPE_CHECKING:
    from tabungan.domain.user import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login.

    ``login_attempts`` is the number of failed attempts that had piled up
    for the email before this success.
    """

    user: User
    access_token: str
    login_attempts: int


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates tabungan_auth infrastructure (password hashing, JWT
    tokens, failed-login tracking) with the User domain to provide:
    - User registration
    - Login with password and lockout

    The attempt tracker and the login locks outlive this service: they are
    owned by the application and shared by every request. Logins for one
    email run one at a time, from the lockout check to the recorded
    outcome, so concurrent guesses cannot slip past the threshold.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        attempt_tracker: LoginAttemptTracker,
        login_locks: KeyedLock | None = None,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._attempt_tracker = attempt_tracker
        self._login_locks = login_locks or KeyedLock()

    async def register(
        self,
        name: str,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        password_hash = self._password_service.hash(password)
        user = User.create(name=name, email=email, password_hash=password_hash)
        await self._user_repo.save(user)

        access_token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )

        logger.info("User registered: %s", user.email)
        return user, access_token

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Check credentials and issue a session token.

        Parameters
        ----------
        email
            Login email; matched case-insensitively
        password
            Plaintext password

        Returns
        -------
        The user, a fresh access token and the prior failure count

        Raises
        ------
        AccountLockedError
            If the email has reached the failed-attempt threshold. The
            password is not checked in this case.
        InvalidCredentialsError
            If the email is unknown or the password is wrong
        """
        identity = normalize_email(email)
        async with self._login_locks.hold(identity):
            return await self._login_locked(identity, password)

    async def _login_locked(self, identity: str, password: str) -> LoginResult:
        failed_attempts = await self._attempt_tracker.get_failed_attempts(identity)
        if self._attempt_tracker.is_locked_out(failed_attempts):
            logger.warning("Login refused for %s: too many attempts", identity)
            raise AccountLockedError(failed_attempts=failed_attempts)

        user = await self._user_repo.find_by_email(identity)

        # Unknown emails are checked against a placeholder hash so both
        # failure paths cost one bcrypt verification.
        password_hash = (
            user.password_hash
            if user is not None
            else self._password_service.placeholder_hash
        )
        password_matches = self._password_service.verify(password, password_hash)

        if user is None or not password_matches:
            attempts = await self._attempt_tracker.record_failure(identity)
            logger.info("Failed login for %s (attempt %d)", identity, attempts)
            raise InvalidCredentialsError

        await self._attempt_tracker.clear(identity)
        access_token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )

        logger.info("User logged in: %s", identity)
        return LoginResult(
            user=user,
            access_token=access_token,
            login_attempts=failed_attempts,
        )

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
