"""
Propagation of trace identity across process boundaries.
"""

from typing import Optional
import logging
import re

from .models.span_context import SpanContext

logger = logging.getLogger(__name__)

TRACEPARENT_REGEXP = re.compile(
    "^[ \t]*"  # whitespace
    "([0-9a-f]{32})?"  # trace_id
    "-?([0-9a-f]{16})?"  # span_id
    "-?([01])?"  # sampled
    "[ \t]*$"  # whitespace
)


def extract_traceparent_data(traceparent: Optional[str]) -> Optional[SpanContext]:
    """
    Parse a traceparent header value produced by Span.to_traceparent.

    Args:
        traceparent: Header value in the form ``{trace_id}-{span_id}-{0|1}``

    Returns:
        SpanContext with trace_id, parent_span_id and sampled set from the
        header, or None if the value is not a traceparent
    """
    if not traceparent:
        return None

    match = TRACEPARENT_REGEXP.match(traceparent)
    if match is None:
        logger.debug(f"Ignoring malformed traceparent '{traceparent}'")
        return None

    trace_id, parent_span_id, sampled_flag = match.groups()
    sampled = None
    if sampled_flag is not None:
        sampled = sampled_flag == "1"

    return SpanContext(trace_id=trace_id, parent_span_id=parent_span_id, sampled=sampled)
