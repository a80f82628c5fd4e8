"""Maps a terminal transport failure to the client's error taxonomy."""

from typing import Dict, Optional, Type

from notification_sdk.exceptions import (
    AuthenticationError,
    ErrorKind,
    GenericClientError,
    NotificationClientError,
    NotificationNotFoundError,
    NotificationResponseError,
    NotificationValidationError,
    RateLimitExceededError,
    ServiceUnavailableError,
)
from notification_sdk.transport.exceptions import TransportError, TransportResponseError

STATUS_ERROR_KINDS: Dict[int, ErrorKind] = {
    400: ErrorKind.VALIDATION,
    401: ErrorKind.AUTHENTICATION,
    404: ErrorKind.NOT_FOUND,
    429: ErrorKind.RATE_LIMIT_EXCEEDED,
    502: ErrorKind.SERVICE_UNAVAILABLE,
    503: ErrorKind.SERVICE_UNAVAILABLE,
    504: ErrorKind.SERVICE_UNAVAILABLE,
}

_KIND_ERRORS: Dict[ErrorKind, Type[NotificationClientError]] = {
    ErrorKind.VALIDATION: NotificationValidationError,
    ErrorKind.NOT_FOUND: NotificationNotFoundError,
    ErrorKind.RATE_LIMIT_EXCEEDED: RateLimitExceededError,
    ErrorKind.SERVICE_UNAVAILABLE: ServiceUnavailableError,
    ErrorKind.GENERIC: GenericClientError,
}


def error_kind_for_status(status_code: Optional[int]) -> ErrorKind:
    """Error kind for an HTTP status; GENERIC when no dedicated kind exists."""
    if status_code is None:
        return ErrorKind.GENERIC
    return STATUS_ERROR_KINDS.get(status_code, ErrorKind.GENERIC)


def classify(failure: TransportError) -> NotificationClientError:
    """Build the typed error for a failure that will not be retried.

    The returned error carries the original status code and body. The caller
    raises it ``from failure`` so the transport error stays on ``__cause__``.

    Example:
        >>> classify(TransportHTTPError("HTTP 404", status_code=404, body="gone"))
        NotificationNotFoundError('gone')
    """
    if isinstance(failure, TransportResponseError):
        return NotificationResponseError(str(failure))

    status_code = failure.status_code
    body = failure.body
    kind = error_kind_for_status(status_code)

    if kind == ErrorKind.AUTHENTICATION:
        return AuthenticationError(status_code=status_code, body=body)

    if kind == ErrorKind.RATE_LIMIT_EXCEEDED:
        message = "Rate limit exceeded"
    elif body:
        message = body
    else:
        message = str(failure)

    return _KIND_ERRORS[kind](message, status_code=status_code, body=body)
