"""
Transaction model aggregating the spans of one trace for reporting.
"""

from typing import Dict, List, Optional, Any, Tuple, Union
from dataclasses import dataclass
from datetime import datetime
import logging
import weakref

from pydantic import Field, PrivateAttr

from .span import Span

logger = logging.getLogger(__name__)


@dataclass
class TransactionConfig:
    """Configuration for span collection in a transaction."""
    max_spans: int = 1000


class Transaction(Span):
    """
    Root span of a trace that owns every span started beneath it.

    Spans created with start_child on the transaction or on any of its
    descendants, or constructed with ``transaction=``, are recorded here up
    to ``TransactionConfig.max_spans``. Spans past the limit still report
    to the transaction but are left out of its payload.
    """
    name: str = Field("", description="Name of the transaction")

    _config: TransactionConfig = PrivateAttr(default_factory=TransactionConfig)
    _spans: List[Span] = PrivateAttr(default_factory=list)
    _dropped_spans: int = PrivateAttr(default=0)
    _finished: bool = PrivateAttr(default=False)

    def __init__(self, config: Optional[TransactionConfig] = None, **kwargs: Any):
        """
        Initialize the transaction.

        Args:
            config: Span collection settings
            **kwargs: Any SpanContext field and ``name``
        """
        super().__init__(**kwargs)
        self._transaction_ref = weakref.ref(self)
        if config is not None:
            self._config = config

    @property
    def spans(self) -> Tuple[Span, ...]:
        """Spans recorded by this transaction, in creation order."""
        return tuple(self._spans)

    @property
    def dropped_spans(self) -> int:
        """Number of spans not recorded because the limit was reached."""
        return self._dropped_spans

    def finish(self, end_timestamp: Union[None, float, str, datetime] = None) -> Optional[Dict[str, Any]]:
        """
        Finish the transaction and assemble its payload.

        Finishing again overwrites the end timestamp but produces no
        second payload.

        Args:
            end_timestamp: End time to record instead of the current time

        Returns:
            The transaction event, or None if the trace was not sampled or
            the transaction was already finished
        """
        super().finish(end_timestamp)

        if self._finished:
            logger.debug(f"Transaction '{self.name}' was already finished, not reporting it again")
            return None
        self._finished = True

        if self.sampled is False:
            logger.debug(f"Discarding transaction '{self.name}' because it was not chosen to be sampled")
            return None

        event = self.to_event()
        logger.debug(
            f"Finished transaction '{self.name}' with {len(event['spans'])} of "
            f"{len(self._spans)} recorded spans"
        )
        return event

    def to_event(self) -> Dict[str, Any]:
        """
        Build the transaction payload.

        Only finished spans are included.
        """
        event = {
            "type": "transaction",
            "transaction": self.name,
            "contexts": {"trace": self.get_trace_context()},
            "spans": [span.to_json() for span in self._spans if span.end_timestamp is not None],
            "start_timestamp": self.start_timestamp,
        }
        if self.end_timestamp is not None:
            event["timestamp"] = self.end_timestamp
        if self.tags:
            event["tags"] = dict(self.tags)
        return event

    def _record_span(self, span: Span) -> bool:
        span._transaction_ref = weakref.ref(self)
        if len(self._spans) >= self._config.max_spans:
            if self._dropped_spans == 0:
                logger.warning(
                    f"Transaction '{self.name}' reached the limit of {self._config.max_spans} spans, "
                    f"further spans will not be included in its payload"
                )
            self._dropped_spans += 1
            return False

        self._spans.append(span)
        return True
