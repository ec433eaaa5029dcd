"""
Configuration shapes used to seed new spans.
"""

from typing import Dict, Optional, Any, Union
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, field_validator

from ..utils import parse_timestamp

Primitive = Union[str, int, float, bool, None]


class BaseSpanContext(BaseModel):
    """Caller-assignable span attributes."""
    tags: Optional[Dict[str, Primitive]] = Field(
        None,
        description="Key/value labels, each key should be less than 200 characters"
    )
    op: Optional[str] = Field(None, description="Short code identifying the type of operation")
    description: Optional[str] = Field(
        None,
        description="Longer description of the operation, stable across instances of the span"
    )
    start_timestamp: Optional[float] = Field(None, description="When the measuring started, in seconds")
    end_timestamp: Optional[float] = Field(None, description="When the measuring finished, in seconds")
    status: Optional[str] = Field(None, description="Status of the span, see SpanStatus")
    data: Optional[Dict[str, Any]] = Field(None, description="Arbitrary data associated with the span")

    @field_validator("start_timestamp", "end_timestamp", mode="before")
    @classmethod
    def _normalize_timestamp(cls, value: Union[None, float, str, datetime]) -> Optional[float]:
        if value is None:
            return None
        return parse_timestamp(value)

    @field_validator("status", mode="before")
    @classmethod
    def _status_value(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value


class SpanContext(BaseSpanContext):
    """
    Every attribute a span can be seeded with, including the
    system-assigned identifiers and sampling decision.
    """
    trace_id: Optional[str] = Field(None, description="32 hex character identifier of the trace")
    parent_span_id: Optional[str] = Field(None, description="Identifier of the parent span")
    span_id: Optional[str] = Field(None, description="16 hex character identifier of the span")
    sampled: Optional[bool] = Field(None, description="Whether the trace was chosen to be sent")


class ChildSpanContext(BaseSpanContext):
    """
    Input accepted by Span.start_child.

    span_id, trace_id, parent_span_id and sampled are assigned by the
    parent span and are rejected here.
    """

    class Config:
        """Pydantic configuration."""
        extra = "forbid"
