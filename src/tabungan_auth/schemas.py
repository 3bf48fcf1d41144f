"""Data carried inside session tokens."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Claims of a verified session token.

    ``user_id`` comes from the ``sub`` claim; ``exp`` is always UTC.
    """

    user_id: UUID
    email: str
    exp: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(tz=timezone.utc)) >= self.exp
