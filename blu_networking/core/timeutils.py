"""Current date/time in the organisation's configured timezone."""

from datetime import date, datetime, timezone

import pytz

from blu_networking.config import get_settings

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)


def get_current_date() -> date:
    """Get current date in configured timezone."""
    return datetime.now(tz).date()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_local(value: datetime) -> datetime:
    # SQLite hands back naive UTC timestamps
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz)
