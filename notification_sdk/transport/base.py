"""Transport contract used by the dispatcher."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class BaseTransport(ABC):
    """Sends one JSON request to the notification service.

    Implementations attach authentication, apply connect/read timeouts and
    report failures as TransportError subclasses. They never retry; retrying
    is the dispatcher's job.
    """

    @abstractmethod
    def request(
        self,
        method: str,
        path: str,
        json: Optional[Any] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Perform a request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the service's API root (e.g. "/notifications")
            json: JSON-serializable request body
            params: Query parameters

        Returns:
            Decoded JSON body, or None when the response has no body

        Raises:
            TransportHTTPError: On 4xx or 5xx status
            TransportTimeoutError: On connect/read timeout
            TransportConnectionError: When the request could not be delivered
            TransportResponseError: When the body is not valid JSON
        """

    def close(self) -> None:
        """Release pooled connections. Default: nothing to release."""
