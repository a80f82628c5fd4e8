"""Low-level failures reported by a transport.

These never reach callers of the client directly: the dispatcher retries the
transient ones and classifies the terminal one into a NotificationClientError.
"""

from typing import Optional


class TransportError(Exception):
    """Base exception for all transport failures.

    Attributes:
        url: URL that was being requested
        status_code: HTTP status when a response was received, else None
        body: Response body text when a response was received, else None
    """

    status_code: Optional[int] = None
    body: Optional[str] = None

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class TransportHTTPError(TransportError):
    """The service answered with a 4xx or 5xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        url: Optional[str] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code
        self.body = body


class TransportTimeoutError(TransportError):
    """Connect or read timeout expired before a response arrived."""


class TransportConnectionError(TransportError):
    """The request could not be delivered (DNS, refused connection, reset...)."""


class TransportResponseError(TransportError):
    """A successful response carried a body that is not valid JSON."""
