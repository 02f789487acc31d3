"""
Timestamp normalization

Access logs reach the service in several shapes: native datetimes read
back from the database (naive values are stored as UTC), ISO-8601 strings
from imported or legacy records, and epoch milliseconds. Everything is
converted to an aware UTC datetime here, once, before comparison or
display.
"""

from datetime import UTC, datetime, timedelta, timezone
from typing import Union

TimestampLike = Union[datetime, str, int, float]

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def normalize_timestamp(value: TimestampLike) -> datetime:
    """
    Convert a stored timestamp to an aware UTC datetime.

    Raises:
        ValueError: value is empty, unparseable or of an unsupported type
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    # bool is an int subclass and never a valid timestamp
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=UTC)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Empty timestamp")
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return normalize_timestamp(datetime.fromisoformat(text))

    raise ValueError(f"Unsupported timestamp type: {type(value).__name__}")


def format_display_timestamp(value: TimestampLike, utc_offset_hours: int = 8) -> str:
    """Format a timestamp as local wall time, e.g. '2024-03-01 08:15:00'"""
    local_tz = timezone(timedelta(hours=utc_offset_hours))
    return normalize_timestamp(value).astimezone(local_tz).strftime(DISPLAY_FORMAT)
