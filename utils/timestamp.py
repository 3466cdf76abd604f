"""Millisecond wall-clock utilities."""

import time
from datetime import datetime, timezone


def now_millis():
    """Current time in milliseconds since Unix epoch."""
    return time.time_ns() // 1_000_000


def to_datetime(epoch_ms):
    """Aware UTC datetime for a millisecond timestamp."""
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)


def format_timestamp(epoch_ms=None):
    """Format timestamp as ISO 8601 with milliseconds."""
    if epoch_ms is None:
        epoch_ms = now_millis()

    return to_datetime(epoch_ms).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
