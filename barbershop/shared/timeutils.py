"""Timezone normalization helpers."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo


def to_utc(value: datetime, tz: ZoneInfo) -> datetime:
    """Interpret naive values in ``tz`` and return a UTC datetime without sub-second noise."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz)
    return value.astimezone(timezone.utc).replace(microsecond=0)


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def local_midnight_utc(tz: ZoneInfo, now: datetime | None = None) -> datetime:
    """Start of the current day in ``tz``, expressed in UTC."""
    local_now = (now or utcnow()).astimezone(tz)
    midnight = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight.astimezone(timezone.utc)
