"""
Clock, identifier and timestamp helpers used by spans.
"""

from typing import Union
from datetime import datetime, timezone
import logging
import time
import uuid

logger = logging.getLogger(__name__)


def timestamp_in_seconds() -> float:
    """Return the current wall-clock time in seconds, with fractions."""
    return time.time()


def generate_trace_id() -> str:
    """Generate a 16-byte trace ID as a 32 character hex string."""
    return uuid.uuid4().hex


def generate_span_id() -> str:
    """Generate an 8-byte span ID as a 16 character hex string."""
    return uuid.uuid4().hex[16:]


def parse_timestamp(timestamp: Union[int, float, str, datetime], strict: bool = False) -> float:
    """
    Normalize a timestamp to seconds since the epoch.

    Args:
        timestamp: Number of seconds, datetime object or ISO-8601 string
        strict: Raise instead of falling back to the current time

    Returns:
        Timestamp in seconds as a float

    Raises:
        ValueError: If strict is set and the value cannot be parsed
    """
    if isinstance(timestamp, (int, float)):
        return float(timestamp)
    if isinstance(timestamp, datetime):
        return _datetime_to_seconds(timestamp)

    # Handle different timestamp formats
    try:
        if 'T' in timestamp:
            parsed = datetime.fromisoformat(timestamp.replace('Z', '+00:00'))
        else:
            parsed = datetime.strptime(timestamp, '%Y-%m-%d %H:%M:%S')
        return _datetime_to_seconds(parsed)
    except (ValueError, AttributeError) as e:
        if strict:
            raise ValueError(f"Invalid timestamp '{timestamp}'") from e
        logger.warning(f"Failed to parse timestamp '{timestamp}': {e}. Using current time.")
        return timestamp_in_seconds()


def _datetime_to_seconds(value: datetime) -> float:
    # naive datetimes are UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()
