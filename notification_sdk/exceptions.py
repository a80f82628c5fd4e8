"""Error taxonomy raised by the notification client.

Every error a caller can receive from a dispatch derives from
NotificationClientError and carries an ErrorKind, plus the HTTP status and
response body when the failure came back from the service.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Coarse classification of a failed dispatch."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    AUTHENTICATION = "authentication"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    SERVICE_UNAVAILABLE = "service_unavailable"
    GENERIC = "generic"


class NotificationClientError(Exception):
    """Base exception for all notification client errors.

    Attributes:
        message: Human-readable description
        status_code: HTTP status reported by the service, None for local or
            connection-level failures
        body: Raw response body, None when no response was received
    """

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class NotificationValidationError(NotificationClientError):
    """Request rejected, either locally before sending or by the service (400).

    Attributes:
        field: Name of the offending request field when known
        index: Position of the offending entry within a bulk request
        server_side: True when the service reported the failure
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        index: Optional[int] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message, status_code=status_code, body=body)
        self.field = field
        self.index = index

    @property
    def server_side(self) -> bool:
        return self.status_code is not None


class NotificationNotFoundError(NotificationClientError):
    """The notification (or device) addressed by id does not exist (404)."""

    kind = ErrorKind.NOT_FOUND


class AuthenticationError(NotificationClientError):
    """API key missing or rejected (401).

    The message is fixed; the service's response body is kept on ``body``
    for diagnostics but never becomes part of the message.
    """

    kind = ErrorKind.AUTHENTICATION
    DEFAULT_MESSAGE = "Invalid or missing API key"

    def __init__(self, status_code: Optional[int] = 401, body: Optional[str] = None) -> None:
        super().__init__(self.DEFAULT_MESSAGE, status_code=status_code, body=body)


class RateLimitExceededError(NotificationClientError):
    """The service throttled the caller (429)."""

    kind = ErrorKind.RATE_LIMIT_EXCEEDED


class ServiceUnavailableError(NotificationClientError):
    """Gateway or upstream outage (502, 503, 504) that outlasted the retries."""

    kind = ErrorKind.SERVICE_UNAVAILABLE


class GenericClientError(NotificationClientError):
    """Any failure without a dedicated kind; wraps status and body as received."""

    kind = ErrorKind.GENERIC


class NotificationResponseError(NotificationClientError):
    """The service answered successfully but the body did not match the expected shape."""

    kind = ErrorKind.GENERIC


class DispatchCancelledError(NotificationClientError):
    """A cancel signal was raised while waiting to retry."""

    kind = ErrorKind.GENERIC
