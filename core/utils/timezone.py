"""
Timezone utilities

Stored timestamps are always UTC (ISO-8601 with offset).
"""

from datetime import datetime, timezone


def ensure_utc(dt: datetime) -> datetime:
    """Attach/convert to UTC

    Args:
        dt: datetime (naive values are taken as UTC)

    Returns:
        datetime with tzinfo=timezone.utc

    Example:
        >>> ensure_utc(datetime(2024, 3, 1, 12, 0)).isoformat()
        '2024-03-01T12:00:00+00:00'
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def now_utc() -> datetime:
    """Current UTC time (explicit tzinfo)"""
    return datetime.now(timezone.utc)


def parse_utc(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into UTC

    Accepts the trailing "Z" and SQLite's "YYYY-MM-DD HH:MM:SS" form.

    Raises:
        ValueError: unparseable value
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))
