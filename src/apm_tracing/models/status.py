"""
Status vocabulary for spans and transactions.
"""

from enum import Enum


class SpanStatus(str, Enum):
    """Outcome of the operation measured by a span."""
    OK = "ok"
    DEADLINE_EXCEEDED = "deadline_exceeded"
    UNAUTHENTICATED = "unauthenticated"
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    INVALID_ARGUMENT = "invalid_argument"
    UNIMPLEMENTED = "unimplemented"
    UNAVAILABLE = "unavailable"
    INTERNAL_ERROR = "internal_error"
    UNKNOWN_ERROR = "unknown_error"
    CANCELLED = "cancelled"
    ALREADY_EXISTS = "already_exists"
    FAILED_PRECONDITION = "failed_precondition"
    ABORTED = "aborted"
    OUT_OF_RANGE = "out_of_range"
    DATA_LOSS = "data_loss"

    @classmethod
    def from_http_code(cls, http_status: int) -> "SpanStatus":
        """
        Map an HTTP status code to a span status.

        Every integer maps to some status; codes outside the known
        ranges map to UNKNOWN_ERROR.

        Args:
            http_status: Numeric HTTP response status

        Returns:
            The matching SpanStatus
        """
        if 100 <= http_status < 400:
            return cls.OK

        if 400 <= http_status < 500:
            return _CLIENT_ERRORS.get(http_status, cls.INVALID_ARGUMENT)

        if 500 <= http_status < 600:
            return _SERVER_ERRORS.get(http_status, cls.INTERNAL_ERROR)

        return cls.UNKNOWN_ERROR


_CLIENT_ERRORS = {
    401: SpanStatus.UNAUTHENTICATED,
    403: SpanStatus.PERMISSION_DENIED,
    404: SpanStatus.NOT_FOUND,
    409: SpanStatus.ALREADY_EXISTS,
    413: SpanStatus.FAILED_PRECONDITION,
    429: SpanStatus.RESOURCE_EXHAUSTED,
}

_SERVER_ERRORS = {
    501: SpanStatus.UNIMPLEMENTED,
    503: SpanStatus.UNAVAILABLE,
    504: SpanStatus.DEADLINE_EXCEEDED,
}
