"""Unit tests for AuthenticationService login and registration."""

import asyncio
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from tabungan.application.services import AuthenticationService, KeyedLock
from tabungan.domain.user import EmailAlreadyExistsError, User, UserRepository
from tabungan_auth import (
    AccountLockedError,
    InvalidCredentialsError,
    JWTService,
    LoginAttemptTracker,
    PasswordHashingService,
)

STORED_HASH = "stored-hash"
PLACEHOLDER_HASH = "placeholder-hash"
GOOD_PASSWORD = "correct-horse"


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


class CostlyVerifier:
    """Password checker whose every call advances a fake clock by one cost."""

    COST = timedelta(milliseconds=250)

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.placeholder_hash = PLACEHOLDER_HASH
        self.calls: list[str] = []

    def verify(self, password: str, password_hash: str) -> bool:
        self.calls.append(password_hash)
        self.clock.advance(self.COST)
        return password_hash == STORED_HASH and password == GOOD_PASSWORD

    @property
    def call_count(self) -> int:
        return len(self.calls)


def _make_user(email: str = "anna@example.com") -> User:
    return User.create(name="Anna", email=email, password_hash=STORED_HASH)


class TestLogin:
    def setup_method(self):
        self.clock = FakeClock()
        self.user = _make_user()

        self.user_repo = AsyncMock(spec=UserRepository)

        async def find_by_email(email):
            return self.user if str(email) == self.user.email else None

        self.user_repo.find_by_email.side_effect = find_by_email

        self.verifier = CostlyVerifier(self.clock)
        self.tracker = LoginAttemptTracker(clock=self.clock)
        self.service = AuthenticationService(
            user_repository=self.user_repo,
            password_service=self.verifier,
            jwt_service=JWTService(secret_key="test-secret"),
            attempt_tracker=self.tracker,
        )

    async def test_successful_login_returns_token(self):
        result = await self.service.login("anna@example.com", GOOD_PASSWORD)

        assert result.user == self.user
        assert result.login_attempts == 0
        payload = self.service.verify_token(result.access_token)
        assert payload.user_id == self.user.id

    async def test_wrong_password_raises_invalid_credentials(self):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await self.service.login("anna@example.com", "wrong-password")

        assert exc_info.value.message == "Wrong email or password"
        assert await self.tracker.get_failed_attempts("anna@example.com") == 1

    async def test_unknown_email_raises_same_error(self):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await self.service.login("nobody@example.com", GOOD_PASSWORD)

        assert exc_info.value.message == "Wrong email or password"

    async def test_unknown_email_checks_placeholder_hash(self):
        with pytest.raises(InvalidCredentialsError):
            await self.service.login("nobody@example.com", GOOD_PASSWORD)

        assert self.verifier.calls == [PLACEHOLDER_HASH]

    async def test_unknown_email_and_wrong_password_take_equal_time(self):
        # Arrange
        start = self.clock.now
        with pytest.raises(InvalidCredentialsError):
            await self.service.login("nobody@example.com", "whatever")
        unknown_email_elapsed = self.clock.now - start

        # Act
        start = self.clock.now
        with pytest.raises(InvalidCredentialsError):
            await self.service.login("anna@example.com", "whatever")
        wrong_password_elapsed = self.clock.now - start

        # Assert
        assert unknown_email_elapsed == wrong_password_elapsed
        assert unknown_email_elapsed == CostlyVerifier.COST

    async def test_sixth_attempt_is_locked_without_password_check(self):
        for _ in range(5):
            with pytest.raises(InvalidCredentialsError):
                await self.service.login("anna@example.com", "wrong-password")
        calls_before = self.verifier.call_count

        with pytest.raises(AccountLockedError) as exc_info:
            await self.service.login("anna@example.com", GOOD_PASSWORD)

        assert self.verifier.call_count == calls_before
        assert exc_info.value.message == (
            "Too many failed login attempts. Try again later."
        )

    async def test_lockout_ends_after_window(self):
        for _ in range(5):
            with pytest.raises(InvalidCredentialsError):
                await self.service.login("anna@example.com", "wrong-password")

        self.clock.advance(timedelta(minutes=30))
        result = await self.service.login("anna@example.com", GOOD_PASSWORD)

        assert result.login_attempts == 0

    async def test_success_reports_prior_failures_then_resets(self):
        for _ in range(3):
            with pytest.raises(InvalidCredentialsError):
                await self.service.login("anna@example.com", "wrong-password")

        result = await self.service.login("anna@example.com", GOOD_PASSWORD)
        assert result.login_attempts == 3

        with pytest.raises(InvalidCredentialsError):
            await self.service.login("anna@example.com", "wrong-password")
        assert await self.tracker.get_failed_attempts("anna@example.com") == 1

    async def test_failures_are_counted_case_insensitively(self):
        with pytest.raises(InvalidCredentialsError):
            await self.service.login("Anna@Example.com", "wrong-password")
        with pytest.raises(InvalidCredentialsError):
            await self.service.login("ANNA@EXAMPLE.COM", "wrong-password")

        result = await self.service.login("anna@example.com", GOOD_PASSWORD)

        assert result.login_attempts == 2

    async def test_unknown_email_failures_also_lock(self):
        for _ in range(5):
            with pytest.raises(InvalidCredentialsError):
                await self.service.login("nobody@example.com", "x")

        with pytest.raises(AccountLockedError):
            await self.service.login("nobody@example.com", "x")

    async def test_concurrent_failures_at_threshold_check_password_once(self):
        # Arrange: one failure short of the lockout, and a store that yields
        for _ in range(4):
            await self.tracker.record_failure("anna@example.com")

        async def slow_find_by_email(email):
            await asyncio.sleep(0)
            return self.user if str(email) == self.user.email else None

        self.user_repo.find_by_email.side_effect = slow_find_by_email
        login_locks = KeyedLock()

        def request_scoped_service() -> AuthenticationService:
            return AuthenticationService(
                user_repository=self.user_repo,
                password_service=self.verifier,
                jwt_service=JWTService(secret_key="test-secret"),
                attempt_tracker=self.tracker,
                login_locks=login_locks,
            )

        # Act
        results = await asyncio.gather(
            *(
                request_scoped_service().login("anna@example.com", "wrong-password")
                for _ in range(20)
            ),
            return_exceptions=True,
        )

        # Assert
        invalid = [r for r in results if isinstance(r, InvalidCredentialsError)]
        locked = [r for r in results if isinstance(r, AccountLockedError)]
        assert self.verifier.call_count == 1
        assert len(invalid) == 1
        assert len(locked) == 19
        assert await self.tracker.get_failed_attempts("anna@example.com") == 5
        assert len(login_locks) == 0

    async def test_concurrent_correct_logins_all_succeed(self):
        self.user_repo.find_by_email.side_effect = None
        self.user_repo.find_by_email.return_value = self.user

        results = await asyncio.gather(
            *(self.service.login("anna@example.com", GOOD_PASSWORD) for _ in range(5))
        )

        assert all(r.user is self.user for r in results)
        assert self.verifier.call_count == 5


class TestRegister:
    def setup_method(self):
        self.user_repo = AsyncMock(spec=UserRepository)
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = STORED_HASH
        self.service = AuthenticationService(
            user_repository=self.user_repo,
            password_service=self.password_service,
            jwt_service=JWTService(secret_key="test-secret"),
            attempt_tracker=LoginAttemptTracker(),
        )

    async def test_register_saves_hashed_user(self):
        self.user_repo.exists_by_email.return_value = False

        user, token = await self.service.register(
            name="Anna",
            email="Anna@Example.com",
            password=GOOD_PASSWORD,
        )

        assert user.email == "anna@example.com"
        assert user.password_hash == STORED_HASH
        self.user_repo.save.assert_awaited_once_with(user)
        assert self.service.verify_token(token).email == "anna@example.com"

    async def test_register_existing_email_raises(self):
        self.user_repo.exists_by_email.return_value = True

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.register(
                name="Anna",
                email="anna@example.com",
                password=GOOD_PASSWORD,
            )

        self.user_repo.save.assert_not_awaited()
        self.password_service.hash.assert_not_called()
