"""Timestamp conversion shared by the models and the storage layer.

Timestamps are held as naive datetimes in local time, the way
``datetime.now()`` returns them. Offset-aware input is converted on the way
in so values from the CLI and the API compare and sort together.
"""

from datetime import datetime


def to_local_naive(value: datetime | None) -> datetime | None:
    """Convert an aware datetime to naive local time. Naive values pass through."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 string, normalized to naive local time."""
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return to_local_naive(datetime.fromisoformat(value))
