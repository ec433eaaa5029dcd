"""
APM Tracing - span and transaction data contract for application monitoring clients.

This package provides:
- The Span model with tag, data and status mutators
- Child span creation that shares the trace and sampling decision
- Mapping of HTTP response codes to span statuses
- Trace context, JSON and traceparent views of a span
- A Transaction that collects finished spans into a reportable payload
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

from .models import (
    Span,
    SpanContext,
    ChildSpanContext,
    SpanStatus,
    Transaction,
    TransactionConfig,
)
from .propagation import extract_traceparent_data

__all__ = [
    "Span",
    "SpanContext",
    "ChildSpanContext",
    "SpanStatus",
    "Transaction",
    "TransactionConfig",
    "extract_traceparent_data",
]
