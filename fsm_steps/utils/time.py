"""
Millisecond timestamp helpers.

Stateful records carry their last-update time as an integer count of
milliseconds since the epoch. These helpers produce and format such values.
"""

import time
from datetime import datetime, timezone
from typing import Optional


def now_ms() -> int:
    """
    Get the current wall-clock time.

    Returns:
        Milliseconds since the Unix epoch
    """
    return time.time_ns() // 1_000_000


def ms_to_datetime(timestamp_ms: int) -> datetime:
    """
    Convert a millisecond timestamp to a UTC datetime.

    Args:
        timestamp_ms: Milliseconds since the Unix epoch

    Returns:
        Timezone-aware UTC datetime
    """
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


def format_timestamp(timestamp_ms: Optional[int]) -> Optional[str]:
    """
    Format a millisecond timestamp for logging.

    Args:
        timestamp_ms: Milliseconds since the Unix epoch, or None

    Returns:
        ISO8601 formatted string, or None when no timestamp is given
    """
    if timestamp_ms is None:
        return None

    return ms_to_datetime(timestamp_ms).isoformat()


def elapsed_ms(start_ms: int, end_ms: Optional[int] = None) -> int:
    """
    Calculate elapsed milliseconds between two timestamps.

    Args:
        start_ms: Start timestamp
        end_ms: End timestamp, defaults to now

    Returns:
        Elapsed time in milliseconds
    """
    if end_ms is None:
        end_ms = now_ms()

    return end_ms - start_ms
