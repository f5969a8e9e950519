"""UTC helpers for file timestamps.

Listings expose mtimes as timezone-aware UTC; never use naive
datetime.fromtimestamp() for them.
"""

from datetime import UTC, datetime


def from_timestamp_utc(timestamp: float) -> datetime:
    """Return a UTC-aware datetime for a Unix timestamp such as st_mtime."""
    return datetime.fromtimestamp(timestamp, tz=UTC)
