"""UTC helpers.

Timestamps are stored and compared in UTC. SQLite hands datetimes back
without tzinfo, so values read from storage go through ``as_utc``.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime, convert an aware one to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
