"""HTTP transport backed by a requests.Session."""

import logging
from typing import Any, Dict, Optional

import requests

from notification_sdk.logging import get_logger

from .base import BaseTransport
from .exceptions import (
    TransportConnectionError,
    TransportHTTPError,
    TransportResponseError,
    TransportTimeoutError,
)

logger = get_logger(__name__, component="transport")

API_KEY_HEADER = "X-API-Key"
DEFAULT_USER_AGENT = "NotificationSDK/1.1"


class HttpTransport(BaseTransport):
    """Sends JSON requests to the notification service.

    Attributes:
        base_url: Service root, e.g. "https://api.example.com"
        api_prefix: Path prefix of the API, e.g. "/api/v1"
        connect_timeout: Seconds allowed to establish a connection
        read_timeout: Seconds allowed between bytes of the response
        log_http: Log every request and response line at INFO
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        api_prefix: str = "/api/v1",
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        log_http: bool = False,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("Base URL is required")

        self.base_url = base_url.strip().rstrip("/")
        self.api_prefix = "/" + api_prefix.strip("/") if api_prefix and api_prefix.strip("/") else ""
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.log_http = log_http

        self._session = session or requests.Session()
        self._session.headers.update({
            "User-Agent": DEFAULT_USER_AGENT,
            "Accept": "application/json",
        })
        if api_key and api_key.strip():
            self._session.headers[API_KEY_HEADER] = api_key.strip()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{self.api_prefix}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        json: Optional[Any] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        url = self.url_for(path)
        request_log_level = logging.INFO if self.log_http else logging.DEBUG

        logger.log(
            request_log_level,
            f"HTTP {method} {url}",
            extra={"event": "transport.request", "method": method, "url": url},
        )

        try:
            response = self._session.request(
                method=method,
                url=url,
                json=json,
                params=params,
                timeout=(self.connect_timeout, self.read_timeout),
            )
        except requests.exceptions.Timeout as e:
            raise TransportTimeoutError(
                f"Request to {url} timed out "
                f"(connect {self.connect_timeout}s, read {self.read_timeout}s)",
                url=url,
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportConnectionError(f"Request to {url} failed: {e}", url=url) from e

        logger.log(
            request_log_level,
            f"HTTP {response.status_code} from {method} {url}",
            extra={
                "event": "transport.response",
                "method": method,
                "url": url,
                "status_code": response.status_code,
            },
        )

        if response.status_code >= 400:
            raise TransportHTTPError(
                f"HTTP {response.status_code}: {response.reason}",
                status_code=response.status_code,
                url=url,
                body=response.text,
            )

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            # requests' JSONDecodeError subclasses ValueError
            raise TransportResponseError(
                f"Failed to parse JSON response from {url}: {e}", url=url
            ) from e

    def close(self) -> None:
        self._session.close()
