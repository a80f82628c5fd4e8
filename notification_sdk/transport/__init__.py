"""Transports carrying requests to the notification service.

    from notification_sdk.transport import HttpTransport
    transport = HttpTransport("https://api.example.com", api_key="...")
    transport.request("GET", "/notifications/abc")
"""

from .base import BaseTransport
from .exceptions import (
    TransportConnectionError,
    TransportError,
    TransportHTTPError,
    TransportResponseError,
    TransportTimeoutError,
)
from .http import API_KEY_HEADER, HttpTransport

__all__ = [
    "BaseTransport",
    "HttpTransport",
    "API_KEY_HEADER",
    "TransportError",
    "TransportHTTPError",
    "TransportTimeoutError",
    "TransportConnectionError",
    "TransportResponseError",
]
