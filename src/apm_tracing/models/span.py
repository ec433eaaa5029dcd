"""
Span model for representing a timed operation inside a trace.
"""

from typing import Dict, Optional, Any, Union, TYPE_CHECKING
from datetime import datetime
from enum import Enum
import logging
import warnings

from pydantic import BaseModel, Field, PrivateAttr

from ..utils import generate_span_id, generate_trace_id, parse_timestamp, timestamp_in_seconds
from .span_context import ChildSpanContext, Primitive, SpanContext
from .status import SpanStatus

if TYPE_CHECKING:
    from .transaction import Transaction

logger = logging.getLogger(__name__)

HTTP_STATUS_CODE_KEY = "http.status_code"


class Span(SpanContext):
    """
    A single timed operation within a distributed trace.

    A span is a plain mutable value meant to be used from one execution
    context. Setters stay usable after ``finish``; such mutations are
    logged at DEBUG level but not rejected.
    """
    span_id: str = Field(
        default_factory=generate_span_id,
        frozen=True,
        description="Unique identifier for the span"
    )
    trace_id: str = Field(
        default_factory=generate_trace_id,
        frozen=True,
        description="Identifier for the trace this span belongs to"
    )
    start_timestamp: float = Field(
        default_factory=timestamp_in_seconds,
        description="When the measuring started, in seconds"
    )
    tags: Dict[str, Primitive] = Field(default_factory=dict, description="Span tags")
    data: Dict[str, Any] = Field(default_factory=dict, description="Arbitrary span data")

    _transaction_ref: Any = PrivateAttr(default=None)

    def __init__(self, transaction: Optional["Transaction"] = None, **kwargs: Any):
        """
        Initialize the span.

        Args:
            transaction: Transaction that records this span, held as a weak reference
            **kwargs: Any SpanContext field
        """
        super().__init__(**kwargs)
        if transaction is not None:
            transaction._record_span(self)

    @property
    def transaction(self) -> Optional["Transaction"]:
        """The transaction this span reports to, if it is still alive."""
        if self._transaction_ref is None:
            return None
        return self._transaction_ref()

    def finish(self, end_timestamp: Union[None, float, str, datetime] = None) -> None:
        """
        Set the finish timestamp of the span.

        Args:
            end_timestamp: End time to record instead of the current time

        Raises:
            ValueError: If end_timestamp is a string that is not a timestamp
        """
        if self.end_timestamp is not None:
            logger.debug(f"Span '{self.span_id}' finished again, overwriting end timestamp")
        if end_timestamp is None:
            self.end_timestamp = timestamp_in_seconds()
        else:
            self.end_timestamp = parse_timestamp(end_timestamp, strict=True)

    def set_tag(self, key: str, value: Primitive) -> "Span":
        """
        Set a tag on the span. Passing None removes the tag.

        Args:
            key: Tag key
            value: Tag value
        """
        self._log_if_finished("set_tag")
        if value is None:
            self.tags.pop(key, None)
        else:
            self.tags[key] = value
        return self

    def set_data(self, key: str, value: Any) -> "Span":
        """Set an arbitrary data attribute on the span."""
        self._log_if_finished("set_data")
        self.data[key] = value
        return self

    def set_status(self, status: Union[str, SpanStatus]) -> "Span":
        """
        Set the status of the span.

        The value is not checked against SpanStatus.
        """
        self._log_if_finished("set_status")
        self.status = status.value if isinstance(status, Enum) else status
        return self

    def set_http_status(self, http_status: int) -> "Span":
        """
        Set the status of the span from an HTTP response code and record
        the code as a tag and as data.

        Args:
            http_status: Numeric HTTP response status
        """
        self.set_tag(HTTP_STATUS_CODE_KEY, str(http_status))
        self.set_data(HTTP_STATUS_CODE_KEY, http_status)
        return self.set_status(SpanStatus.from_http_code(http_status))

    def child(
        self,
        span_context: Union[None, ChildSpanContext, Dict[str, Any]] = None,
        **kwargs: Any
    ) -> "Span":
        """Deprecated alias of start_child."""
        warnings.warn(
            "Span.child() is deprecated, use Span.start_child() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.start_child(span_context, **kwargs)

    def start_child(
        self,
        span_context: Union[None, ChildSpanContext, Dict[str, Any]] = None,
        **kwargs: Any
    ) -> "Span":
        """
        Create a new span with this span as its parent.

        The child shares the trace ID, inherits the sampling decision and
        reports to the same transaction.

        Args:
            span_context: Attributes of the child, as a ChildSpanContext or dict
            **kwargs: Additional ChildSpanContext fields

        Returns:
            The new child span

        Raises:
            pydantic.ValidationError: If the context contains span_id,
                trace_id, parent_span_id or sampled
        """
        if isinstance(span_context, BaseModel):
            span_context = span_context.model_dump(exclude_none=True)
        context = ChildSpanContext.model_validate({**(span_context or {}), **kwargs})

        child = Span(
            **context.model_dump(exclude_none=True),
            parent_span_id=self.span_id,
            trace_id=self.trace_id,
            sampled=self.sampled,
        )

        transaction = self.transaction
        if transaction is not None:
            transaction._record_span(child)
        return child

    def is_success(self) -> bool:
        """Whether the span status is ok."""
        return self.status == SpanStatus.OK.value

    def to_traceparent(self) -> str:
        """Return a traceparent compatible header value."""
        sampled_flag = "1" if self.sampled else "0"
        return f"{self.trace_id}-{self.span_id}-{sampled_flag}"

    def get_trace_context(self) -> Dict[str, Any]:
        """
        Snapshot of the span for the trace context of an event.

        Unset fields and empty tags/data are left out.
        """
        context = {
            "data": dict(self.data) if self.data else None,
            "description": self.description,
            "op": self.op,
            "parent_span_id": self.parent_span_id,
            "span_id": self.span_id,
            "status": self.status,
            "tags": dict(self.tags) if self.tags else None,
            "trace_id": self.trace_id,
        }
        return {key: value for key, value in context.items() if value is not None}

    def to_json(self) -> Dict[str, Any]:
        """
        Snapshot of the span as it appears in a transaction payload.

        The end timestamp is reported as ``timestamp`` once the span is finished.
        """
        payload = self.get_trace_context()
        payload["start_timestamp"] = self.start_timestamp
        if self.end_timestamp is not None:
            payload["timestamp"] = self.end_timestamp
        return payload

    def _log_if_finished(self, action: str) -> None:
        if self.end_timestamp is not None:
            logger.debug(f"{action} called on finished span '{self.span_id}'")
