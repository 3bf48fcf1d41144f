"""In-memory failed-login tracking.

Keeps, per identity, the number of consecutive failed logins and the time
of the last failure. Records expire lazily: a record whose last failure is
older than the window is discarded the next time it is read.

State lives for the lifetime of the owning object only. One tracker is
created per application instance and injected where it is needed.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass(frozen=True)
class LoginThrottlePolicy:
    """Lockout threshold and the window after which failures are forgotten."""

    max_failed_attempts: int = 5
    window: timedelta = timedelta(minutes=30)


@dataclass
class AttemptRecord:
    """Failed attempts for one identity."""

    count: int
    last_failure_time: datetime


class LoginAttemptTracker:
    """Track failed login attempts per identity.

    All reads and writes go through a single ``asyncio.Lock`` so that
    concurrent requests for the same identity cannot lose an increment.

    Examples
    --------
    >>> tracker = LoginAttemptTracker()
    >>> await tracker.record_failure("user@example.com")
    1
    >>> await tracker.get_failed_attempts("user@example.com")
    1
    >>> await tracker.clear("user@example.com")
    """

    def __init__(
        self,
        policy: LoginThrottlePolicy | None = None,
        clock: Clock = _utc_now,
    ):
        self._policy = policy or LoginThrottlePolicy()
        self._clock = clock
        self._lock = asyncio.Lock()
        self._records: dict[str, AttemptRecord] = {}

    @property
    def policy(self) -> LoginThrottlePolicy:
        return self._policy

    def is_locked_out(self, failed_attempts: int) -> bool:
        """Whether the given failure count reaches the lockout threshold."""
        return failed_attempts >= self._policy.max_failed_attempts

    async def get_failed_attempts(self, identity: str) -> int:
        """Return the current failure count, expiring a stale record first."""
        async with self._lock:
            record = self._live_record(identity)
            return record.count if record else 0

    async def record_failure(self, identity: str) -> int:
        """Count one more failure for ``identity`` and return the new count."""
        async with self._lock:
            now = self._clock()
            record = self._live_record(identity)
            if record is None:
                record = AttemptRecord(count=0, last_failure_time=now)
                self._records[identity] = record
            record.count += 1
            record.last_failure_time = now

            if self.is_locked_out(record.count):
                logger.warning(
                    "Login locked for %s after %d failed attempts",
                    identity,
                    record.count,
                )
            return record.count

    async def clear(self, identity: str) -> None:
        """Forget all failures for ``identity``. No-op when nothing is stored."""
        async with self._lock:
            self._records.pop(identity, None)

    def _live_record(self, identity: str) -> AttemptRecord | None:
        # Caller must hold self._lock.
        record = self._records.get(identity)
        if record is None:
            return None
        if self._clock() - record.last_failure_time >= self._policy.window:
            del self._records[identity]
            return None
        return record
