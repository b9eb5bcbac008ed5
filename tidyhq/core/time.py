"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, datetime, time, timedelta


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime for defaults and onupdate hooks."""
    return datetime.now(UTC)


def start_of_month(value: datetime) -> datetime:
    return value.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def day_bounds(value: datetime) -> tuple[datetime, datetime]:
    """Return the first and last instants of the calendar day containing `value`."""
    start = datetime.combine(value.date(), time.min, tzinfo=value.tzinfo)
    return start, start + timedelta(days=1) - timedelta(microseconds=1)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on timezone-aware columns)."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
