"""
Core data models for spans and transactions.
"""

from .span_context import SpanContext, ChildSpanContext, Primitive
from .span import Span
from .status import SpanStatus
from .transaction import Transaction, TransactionConfig

__all__ = [
    "Span",
    "SpanContext",
    "ChildSpanContext",
    "Primitive",
    "SpanStatus",
    "Transaction",
    "TransactionConfig",
]
