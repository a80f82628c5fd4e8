"""Notification service client: the public entry point of the SDK.

Quick start:

    from notification_sdk import create_client

    with create_client(base_url="https://api.example.com", api_key="...") as client:
        client.register_device("user-123", "fcm-token", PlatformType.ANDROID, "device-001")
        client.send_push_to_user("user-123", "Match Alert", "Goal!", "match-alert-template")

Every call blocks until the service answers or a typed error is raised.
"""

import threading
import warnings
from typing import Any, Dict, List, Optional, Sequence, Union
from urllib.parse import quote

from pydantic import ValidationError

from notification_sdk.config.models import ClientConfig
from notification_sdk.dispatch.dispatcher import Dispatcher
from notification_sdk.domain.enums import NotificationPriority, NotificationType, PlatformType
from notification_sdk.domain.requests import (
    RefreshDeviceTokenRequest,
    RegisterDeviceTokenRequest,
    SendNotificationRequest,
    email_request,
    push_request,
    sms_request,
)
from notification_sdk.domain.responses import (
    BulkNotificationResponse,
    DeviceTokenResponse,
    NotificationResponse,
)
from notification_sdk.exceptions import NotificationValidationError
from notification_sdk.logging import get_logger
from notification_sdk.logging.context import log_context

logger = get_logger(__name__, component="client")

DEVICES_REGISTER_PATH = "/devices/register"
DEVICES_REFRESH_PATH = "/devices/refresh"

PriorityLike = Union[NotificationPriority, str, None]


def _parse_priority(priority: PriorityLike) -> NotificationPriority:
    if priority is None:
        return NotificationPriority.NORMAL
    try:
        return NotificationPriority(priority)
    except ValueError as e:
        allowed = ", ".join(p.value for p in NotificationPriority)
        raise NotificationValidationError(
            f"Invalid priority: {priority}. Must be one of: {allowed}", field="priority"
        ) from e


def _build_model(model, **fields):
    """Construct a request model, reporting bad input as a validation error."""
    try:
        return model(**fields)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or None
        raise NotificationValidationError(
            f"Invalid {model.__name__}: {field}: {first['msg']}", field=field
        ) from e


class NotificationServiceClient:
    """Sends email, SMS and push notifications and manages push devices.

    Write operations (sends, device lifecycle) are retried on transient
    failures according to the configured policy; status lookups are not.

    Args:
        dispatcher: Dispatch pipeline bound to a transport
        config: Settings the client was built with
    """

    def __init__(self, dispatcher: Dispatcher, config: ClientConfig) -> None:
        self.dispatcher = dispatcher
        self.config = config
        logger.info(
            f"Notification service client initialized with base URL: {config.base_url}",
            extra={"event": "client.initialized", "base_url": config.base_url},
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self.dispatcher.transport.close()

    def __enter__(self) -> "NotificationServiceClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False

    # ------------------------------------------------------------------
    # Generic send
    # ------------------------------------------------------------------

    def send_notification(
        self,
        request: SendNotificationRequest,
        cancel_event: Optional[threading.Event] = None,
    ) -> NotificationResponse:
        """Send a fully specified notification request."""
        return self.dispatcher.send(request, cancel_event=cancel_event)

    def send_bulk(
        self,
        requests: Sequence[SendNotificationRequest],
        cancel_event: Optional[threading.Event] = None,
    ) -> BulkNotificationResponse:
        """Send several notifications as one batch.

        All entries are validated first; one invalid entry aborts the batch
        before anything is sent. Per-item delivery is reported by the service.
        """
        return self.dispatcher.send_bulk(list(requests), cancel_event=cancel_event)

    def get_status(self, notification_id: str) -> NotificationResponse:
        """Fetch a notification's current state. Not retried."""
        if not notification_id or not notification_id.strip():
            raise NotificationValidationError("Notification ID is required", field="notification_id")

        with log_context(operation="get_status", notification_id=notification_id):
            data = self.dispatcher.execute(
                "GET", f"/notifications/{quote(notification_id, safe='')}", retry=False
            )
            return self.dispatcher.parse_response(NotificationResponse, data)

    # ------------------------------------------------------------------
    # Email
    # ------------------------------------------------------------------

    def send_email(
        self,
        email: str,
        subject: str,
        template_id: str,
        variables: Optional[Dict[str, Any]] = None,
        priority: PriorityLike = None,
    ) -> NotificationResponse:
        """Send a transactional email (routed to the NOTIFICATIONS sender)."""
        return self.send_notification(
            email_request(
                email,
                subject,
                template_id,
                variables,
                notification_type=NotificationType.EMAIL_VERIFICATION,
                priority=_parse_priority(priority),
            )
        )

    def send_email_from(
        self,
        account_name: str,
        email: str,
        subject: str,
        template_id: str,
        variables: Optional[Dict[str, Any]] = None,
        priority: PriorityLike = None,
        notification_type: NotificationType = NotificationType.EMAIL_VERIFICATION,
    ) -> NotificationResponse:
        """Send an email from an explicitly named sender account (e.g. "support")."""
        if not account_name or not account_name.strip():
            raise NotificationValidationError(
                "Email account name is required", field="email_account_name"
            )
        return self.send_notification(
            email_request(
                email,
                subject,
                template_id,
                variables,
                notification_type=notification_type,
                priority=_parse_priority(priority),
                email_account_name=account_name,
            )
        )

    def send_typed_email(
        self,
        notification_type: NotificationType,
        email: str,
        subject: str,
        template_id: str,
        variables: Optional[Dict[str, Any]] = None,
        priority: PriorityLike = None,
    ) -> NotificationResponse:
        """Send an email whose sender is resolved from ``notification_type``."""
        return self.send_notification(
            email_request(
                email,
                subject,
                template_id,
                variables,
                notification_type=notification_type,
                priority=_parse_priority(priority),
            )
        )

    def send_notification_email(
        self,
        email: str,
        subject: str,
        template_id: str,
        variables: Optional[Dict[str, Any]] = None,
        priority: PriorityLike = None,
    ) -> NotificationResponse:
        """No-reply transactional email (NOTIFICATIONS sender)."""
        return self.send_typed_email(
            NotificationType.EMAIL_VERIFICATION, email, subject, template_id, variables, priority
        )

    def send_marketing_email(
        self,
        email: str,
        subject: str,
        template_id: str,
        variables: Optional[Dict[str, Any]] = None,
        priority: PriorityLike = None,
    ) -> NotificationResponse:
        """Campaign or offer email (MARKETING sender)."""
        return self.send_typed_email(
            NotificationType.PROMOTIONAL_OFFER, email, subject, template_id, variables, priority
        )

    def send_support_email(
        self,
        email: str,
        subject: str,
        template_id: str,
        variables: Optional[Dict[str, Any]] = None,
        priority: PriorityLike = None,
    ) -> NotificationResponse:
        """Reply-enabled compliance or support email (SUPPORT sender)."""
        return self.send_typed_email(
            NotificationType.KYC_REVIEW_REQUIRED, email, subject, template_id, variables, priority
        )

    def send_welcome_email(
        self,
        email: str,
        subject: str,
        template_id: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> NotificationResponse:
        return self.send_typed_email(
            NotificationType.WELCOME_EMAIL, email, subject, template_id, variables
        )

    def send_password_reset_email(
        self,
        email: str,
        subject: str,
        template_id: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> NotificationResponse:
        return self.send_typed_email(
            NotificationType.PASSWORD_RESET,
            email,
            subject,
            template_id,
            variables,
            NotificationPriority.HIGH,
        )

    # ------------------------------------------------------------------
    # SMS
    # ------------------------------------------------------------------

    def send_sms(
        self,
        phone_number: str,
        template_id: str,
        variables: Optional[Dict[str, Any]] = None,
        priority: PriorityLike = None,
    ) -> NotificationResponse:
        """Send an SMS; the number must be in international format (+1234567890)."""
        return self.send_notification(
            sms_request(phone_number, template_id, variables, priority=_parse_priority(priority))
        )

    # ------------------------------------------------------------------
    # Push
    # ------------------------------------------------------------------

    def send_push_to_user(
        self,
        user_id: str,
        title: str,
        body: str,
        template_id: str,
        variables: Optional[Dict[str, Any]] = None,
        image_url: Optional[str] = None,
        data: Optional[Dict[str, str]] = None,
        click_action: Optional[str] = None,
    ) -> NotificationResponse:
        """Send a push notification to every registered device of a user."""
        return self.send_notification(
            push_request(
                user_id,
                title,
                body,
                template_id,
                variables,
                image_url=image_url,
                data=data,
                click_action=click_action,
            )
        )

    def send_push(
        self,
        device_token: str,
        title: str,
        body: str,
        template_id: str,
        variables: Optional[Dict[str, Any]] = None,
        image_url: Optional[str] = None,
        data: Optional[Dict[str, str]] = None,
    ) -> NotificationResponse:
        """Send a push notification to a single device token.

        .. deprecated:: 1.1.0
            Use :meth:`send_push_to_user`, which reaches all of a user's devices.
        """
        warnings.warn(
            "send_push() is deprecated; use send_push_to_user() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.send_notification(
            push_request(
                device_token,
                title,
                body,
                template_id,
                variables,
                image_url=image_url,
                data=data,
            )
        )

    # ------------------------------------------------------------------
    # Device tokens
    # ------------------------------------------------------------------

    def register_device(
        self,
        user_id: str,
        token: str,
        platform: Union[PlatformType, str],
        device_id: str,
        app_version: Optional[str] = None,
    ) -> DeviceTokenResponse:
        """Register a device token (FCM or APNS) for push notifications."""
        request = _build_model(
            RegisterDeviceTokenRequest,
            user_id=user_id,
            token=token,
            platform=platform,
            device_id=device_id,
            app_version=app_version,
        )

        with log_context(operation="register_device", user_id=user_id, device_id=device_id):
            data = self.dispatcher.execute("POST", DEVICES_REGISTER_PATH, payload=request.to_payload())
            response = self.dispatcher.parse_response(DeviceTokenResponse, data)
            logger.debug(
                f"Device registered: id={response.id}",
                extra={"event": "client.device.registered", "device_token_id": response.id},
            )
            return response

    def refresh_device_token(self, user_id: str, old_token: str, new_token: str) -> None:
        """Replace a rotated device token."""
        request = _build_model(
            RefreshDeviceTokenRequest, user_id=user_id, old_token=old_token, new_token=new_token
        )

        with log_context(operation="refresh_device_token", user_id=user_id):
            self.dispatcher.execute("PUT", DEVICES_REFRESH_PATH, payload=request.to_payload())
            logger.debug("Device token refreshed", extra={"event": "client.device.refreshed"})

    def unregister_device(self, user_id: str, device_id: str) -> None:
        """Remove a device so it no longer receives pushes."""
        missing: List[str] = [
            name for name, value in (("user_id", user_id), ("device_id", device_id))
            if not value or not value.strip()
        ]
        if missing:
            raise NotificationValidationError(f"{missing[0]} is required", field=missing[0])

        with log_context(operation="unregister_device", user_id=user_id, device_id=device_id):
            self.dispatcher.execute(
                "DELETE",
                f"/devices/{quote(device_id, safe='')}",
                params={"userId": user_id},
            )
            logger.debug("Device unregistered", extra={"event": "client.device.unregistered"})
