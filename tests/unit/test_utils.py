"""
Unit tests for clock, identifier and timestamp helpers.
"""

import re
import time
from datetime import datetime, timezone

import pytest

from apm_tracing.utils import (
    generate_span_id,
    generate_trace_id,
    parse_timestamp,
    timestamp_in_seconds,
)


class TestIdentifiers:
    """Test cases for identifier generation."""

    def test_trace_id_format(self):
        """Test that trace ids are 32 lowercase hex characters."""
        assert re.fullmatch(r"[0-9a-f]{32}", generate_trace_id())

    def test_span_id_format(self):
        """Test that span ids are 16 lowercase hex characters."""
        assert re.fullmatch(r"[0-9a-f]{16}", generate_span_id())


class TestTimestamps:
    """Test cases for timestamp helpers."""

    def test_clock(self):
        """Test that the clock returns fractional epoch seconds."""
        before = time.time()
        now = timestamp_in_seconds()

        assert isinstance(now, float)
        assert before <= now <= time.time()

    def test_parse_number(self):
        """Test that numbers are returned as floats."""
        assert parse_timestamp(12) == 12.0
        assert parse_timestamp(12.75) == 12.75

    def test_parse_aware_datetime(self):
        """Test converting an aware datetime."""
        value = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

        assert parse_timestamp(value) == value.timestamp()

    def test_parse_naive_datetime_as_utc(self):
        """Test that naive datetimes are taken as UTC."""
        naive = datetime(2024, 5, 1, 12, 0)

        assert parse_timestamp(naive) == naive.replace(tzinfo=timezone.utc).timestamp()

    def test_parse_iso_string(self):
        """Test parsing an ISO-8601 string with a Z suffix."""
        expected = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc).timestamp()

        assert parse_timestamp("2024-05-01T12:00:00Z") == expected
        assert parse_timestamp("2024-05-01 12:00:00") == expected

    def test_parse_invalid_string_uses_current_time(self, caplog):
        """Test that an unparseable value falls back to now with a warning."""
        before = time.time()

        result = parse_timestamp("yesterday")

        assert before <= result <= time.time()
        assert "Failed to parse timestamp" in caplog.text

    def test_parse_invalid_string_strict(self):
        """Test that strict parsing raises instead of using the current time."""
        with pytest.raises(ValueError):
            parse_timestamp("yesterday", strict=True)
