"""Dispatch orchestration: validate, route, send with retry, classify.

This is the only part of the client that performs I/O, and it does so
exclusively through a BaseTransport. A dispatch either returns the service's
parsed response or raises a NotificationClientError; it never returns a
partial result.
"""

import threading
import time
from typing import Any, Callable, Dict, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from notification_sdk.domain.enums import NotificationChannel
from notification_sdk.domain.requests import BulkNotificationRequest, SendNotificationRequest
from notification_sdk.domain.responses import BulkNotificationResponse, NotificationResponse
from notification_sdk.exceptions import DispatchCancelledError, NotificationResponseError
from notification_sdk.logging import get_logger
from notification_sdk.logging.context import log_context
from notification_sdk.transport.base import BaseTransport
from notification_sdk.transport.exceptions import TransportError
from notification_sdk.validation.request_validator import validate_request, validate_requests

from .classifier import classify
from .retry import RetryPolicy
from .routing import resolve_email_account

logger = get_logger(__name__, component="dispatch")

NOTIFICATIONS_PATH = "/notifications"
BULK_NOTIFICATIONS_PATH = "/notifications/bulk"

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class Dispatcher:
    """Runs notification requests through the dispatch pipeline.

    Holds no mutable state after construction, so one instance can serve
    concurrent callers on many threads.

    Args:
        transport: Transport used for every network call
        retry_policy: Backoff policy for transient failures
        sleep: Blocking wait used between attempts when no cancel event is given
    """

    def __init__(
        self,
        transport: BaseTransport,
        retry_policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.transport = transport
        self.retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep

    def send(
        self,
        request: SendNotificationRequest,
        cancel_event: Optional[threading.Event] = None,
    ) -> NotificationResponse:
        """Validate, route and send one notification.

        Raises:
            NotificationValidationError: Request invalid (nothing sent) or
                rejected by the service
            NotificationClientError: Any other terminal failure
        """
        validate_request(request)

        with log_context(
            operation="send",
            notification_type=request.type.value,
            channel=request.channel.value,
        ):
            data = self.execute(
                "POST",
                NOTIFICATIONS_PATH,
                payload=self.build_payload(request),
                cancel_event=cancel_event,
            )
            response = self.parse_response(NotificationResponse, data)
            logger.debug(
                f"Notification accepted: id={response.id}",
                extra={"event": "dispatch.notification.accepted", "notification_id": response.id},
            )
            return response

    def send_bulk(
        self,
        requests: Sequence[SendNotificationRequest],
        cancel_event: Optional[threading.Event] = None,
    ) -> BulkNotificationResponse:
        """Validate every request, then submit them as one batch.

        One invalid entry aborts the whole batch before any network call.
        """
        validate_requests(requests)
        batch = BulkNotificationRequest(notifications=list(requests))

        with log_context(operation="send_bulk", batch_size=len(batch.notifications)):
            data = self.execute(
                "POST",
                BULK_NOTIFICATIONS_PATH,
                payload=self.build_bulk_payload(batch),
                cancel_event=cancel_event,
            )
            response = self.parse_response(BulkNotificationResponse, data)
            logger.debug(
                f"Batch accepted: batch_id={response.batch_id}",
                extra={"event": "dispatch.batch.accepted", "batch_id": response.batch_id},
            )
            return response

    @staticmethod
    def build_payload(request: SendNotificationRequest) -> Dict[str, Any]:
        """Wire body for a validated request, with sender routing for email.

        Routing fields come only from the resolved account, never from the
        raw ``email_account_name`` on the request.
        """
        payload = request.to_payload()
        payload.pop("emailAccountName", None)
        if request.channel == NotificationChannel.EMAIL:
            payload.update(resolve_email_account(request).as_payload())
        return payload

    @classmethod
    def build_bulk_payload(cls, batch: BulkNotificationRequest) -> Dict[str, Any]:
        """Wire body for a batch; each entry is routed like a single send."""
        payload = batch.to_payload()
        payload["notifications"] = [cls.build_payload(r) for r in batch.notifications]
        return payload

    def execute(
        self,
        method: str,
        path: str,
        payload: Optional[Any] = None,
        params: Optional[Dict[str, str]] = None,
        retry: bool = True,
        cancel_event: Optional[threading.Event] = None,
    ) -> Any:
        """Send one request, retrying transient failures.

        Args:
            method: HTTP method
            path: API path
            payload: JSON body, resent unchanged on every attempt
            params: Query parameters
            retry: False for read operations, which get a single attempt
            cancel_event: Aborts a pending backoff wait when set

        Returns:
            Decoded JSON body of the successful response (None if empty)

        Raises:
            NotificationClientError: Classified terminal failure
            DispatchCancelledError: cancel_event set while waiting to retry
        """
        policy = self.retry_policy if retry else RetryPolicy.no_retry()
        attempt = 0

        while True:
            attempt += 1
            logger.debug(
                f"{method} {path} (attempt {attempt}/{policy.max_attempts})",
                extra={"event": "dispatch.attempt", "path": path, "attempt": attempt},
            )

            try:
                result = self.transport.request(method, path, json=payload, params=params)
            except TransportError as e:
                if policy.should_retry(attempt, e):
                    delay = policy.delay_for(attempt)
                    logger.warning(
                        f"{method} {path} failed (attempt {attempt}/{policy.max_attempts}), "
                        f"retrying in {delay:.1f}s: {e}",
                        extra={
                            "event": "dispatch.retry",
                            "path": path,
                            "attempt": attempt,
                            "status_code": e.status_code,
                            "error_type": type(e).__name__,
                            "delay_seconds": delay,
                        },
                    )
                    self._wait(delay, cancel_event)
                    continue

                error = classify(e)
                logger.error(
                    f"{method} {path} failed after {attempt} attempt(s): {error.message}",
                    extra={
                        "event": "dispatch.failed",
                        "path": path,
                        "attempts": attempt,
                        "status_code": e.status_code,
                        "error_kind": error.kind.value,
                    },
                )
                raise error from e

            logger.info(
                f"{method} {path} succeeded",
                extra={"event": "dispatch.succeeded", "path": path, "attempts": attempt},
            )
            return result

    def _wait(self, delay: float, cancel_event: Optional[threading.Event]) -> None:
        if cancel_event is None:
            self._sleep(delay)
            return

        if cancel_event.wait(delay):
            logger.warning(
                "Dispatch cancelled while waiting to retry",
                extra={"event": "dispatch.cancelled"},
            )
            raise DispatchCancelledError("Dispatch cancelled while waiting to retry")

    @staticmethod
    def parse_response(model: Type[ResponseT], data: Any) -> ResponseT:
        """Parse a response body into ``model``.

        Raises:
            NotificationResponseError: Missing body or shape mismatch
        """
        if data is None:
            raise NotificationResponseError(f"Empty response body, expected {model.__name__}")
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise NotificationResponseError(
                f"Unexpected {model.__name__} payload: {e.error_count()} invalid field(s)",
                body=str(data),
            ) from e
