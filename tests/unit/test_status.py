"""
Unit tests for SpanStatus and the HTTP status mapping.
"""

import pytest

from apm_tracing.models import SpanStatus


class TestSpanStatus:
    """Test cases for the status vocabulary."""

    def test_values_compare_as_strings(self):
        """Test that members compare equal to their wire value."""
        assert SpanStatus.OK == "ok"
        assert SpanStatus("deadline_exceeded") is SpanStatus.DEADLINE_EXCEEDED

    @pytest.mark.parametrize("code", [100, 200, 201, 204, 301, 304, 399])
    def test_success_codes(self, code):
        """Test that informational, success and redirect codes map to ok."""
        assert SpanStatus.from_http_code(code) is SpanStatus.OK

    @pytest.mark.parametrize("code,expected", [
        (401, SpanStatus.UNAUTHENTICATED),
        (403, SpanStatus.PERMISSION_DENIED),
        (404, SpanStatus.NOT_FOUND),
        (409, SpanStatus.ALREADY_EXISTS),
        (413, SpanStatus.FAILED_PRECONDITION),
        (429, SpanStatus.RESOURCE_EXHAUSTED),
        (400, SpanStatus.INVALID_ARGUMENT),
        (418, SpanStatus.INVALID_ARGUMENT),
    ])
    def test_client_errors(self, code, expected):
        """Test mapping of 4xx codes."""
        assert SpanStatus.from_http_code(code) is expected

    @pytest.mark.parametrize("code,expected", [
        (501, SpanStatus.UNIMPLEMENTED),
        (503, SpanStatus.UNAVAILABLE),
        (504, SpanStatus.DEADLINE_EXCEEDED),
        (500, SpanStatus.INTERNAL_ERROR),
        (502, SpanStatus.INTERNAL_ERROR),
    ])
    def test_server_errors(self, code, expected):
        """Test mapping of 5xx codes."""
        assert SpanStatus.from_http_code(code) is expected

    @pytest.mark.parametrize("code", [-1, 0, 99, 600, 999])
    def test_unknown_codes(self, code):
        """Test that codes outside the HTTP ranges fall back to unknown_error."""
        assert SpanStatus.from_http_code(code) is SpanStatus.UNKNOWN_ERROR
