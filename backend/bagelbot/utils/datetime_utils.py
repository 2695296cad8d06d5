"""Datetime utility functions."""

from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from bagelbot.config import settings

# Timezone that defines the business day and API timestamps (from config)
API_TIMEZONE = ZoneInfo(settings.timezone)


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(UTC)


def _ensure_aware(dt: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored as UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def to_api_timezone(dt: datetime | None) -> datetime | None:
    """Convert a datetime to API timezone (from config).

    Args:
        dt: Datetime to convert (can be None)

    Returns:
        Datetime in API timezone, or None if input was None
    """
    if dt is None:
        return None
    return _ensure_aware(dt).astimezone(API_TIMEZONE)


def business_day(dt: datetime) -> date:
    """Calendar date of ``dt`` in the business timezone."""
    return _ensure_aware(dt).astimezone(API_TIMEZONE).date()


def business_day_bounds(day: date) -> tuple[datetime, datetime]:
    """Return the [start, end) UTC range covering ``day`` in the business timezone."""
    start = datetime.combine(day, time.min, tzinfo=API_TIMEZONE)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=API_TIMEZONE)
    return start.astimezone(UTC), end.astimezone(UTC)
