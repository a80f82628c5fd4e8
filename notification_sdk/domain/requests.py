"""Request models sent to the notification service.

All request models are immutable. Changing a field means building a new
instance (see ``SendNotificationRequest.with_changes``), so a request that
is being retried is always the exact payload of the first attempt.

Fields are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from notification_sdk.utils.timestamps import format_local_datetime, parse_local_datetime

from .enums import NotificationChannel, NotificationPriority, NotificationType, PlatformType

_WIRE_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    use_enum_values=False,
)


class WireModel(BaseModel):
    """Base for models serialized to the service."""

    model_config = _WIRE_CONFIG

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys; unset optional fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SendNotificationRequest(WireModel):
    """A single notification to deliver.

    Required fields (type, channel, recipient, template_id) are typed as
    optional on purpose: a request missing one of them can still be built,
    and ``validate_request`` reports the missing field by name before any
    network call.

    Channel-specific fields:
        EMAIL: subject (required), cc_recipients, bcc_recipients, attachments
        PUSH: title and body (required), data, image_url, click_action
        SMS: provider hint
    """

    type: Optional[NotificationType] = None
    channel: Optional[NotificationChannel] = None
    recipient: Optional[str] = None
    template_id: Optional[str] = None
    template_variables: Optional[Dict[str, Any]] = None
    priority: NotificationPriority = NotificationPriority.NORMAL
    scheduled_at: Optional[datetime] = Field(
        None, description="Passed through to the service; not checked client-side"
    )

    subject: Optional[str] = None
    cc_recipients: Optional[List[str]] = None
    bcc_recipients: Optional[List[str]] = None
    attachments: Optional[List[str]] = None

    title: Optional[str] = None
    body: Optional[str] = None
    data: Optional[Dict[str, str]] = None
    image_url: Optional[str] = None
    click_action: Optional[str] = None

    provider: Optional[str] = None

    email_account_name: Optional[str] = Field(
        None, description="Explicit sender account; overrides the type's category"
    )

    @field_validator("scheduled_at", mode="before")
    @classmethod
    def parse_scheduled_at(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_local_datetime(v)
        return v

    @field_serializer("scheduled_at")
    def serialize_scheduled_at(self, v: Optional[datetime]) -> Optional[str]:
        return format_local_datetime(v)

    def with_changes(self, **changes: Any) -> "SendNotificationRequest":
        """Return a new request with the given fields replaced.

        Example:
            >>> urgent = request.with_changes(priority=NotificationPriority.URGENT)
        """
        return type(self).model_validate({**self.model_dump(), **changes})


class BulkNotificationRequest(WireModel):
    """A batch of notifications submitted together."""

    notifications: List[SendNotificationRequest]


class RegisterDeviceTokenRequest(WireModel):
    """Registers a push token (FCM or APNS) for a user's device."""

    user_id: str = Field(..., min_length=1)
    token: str = Field(..., min_length=1)
    platform: PlatformType
    device_id: str = Field(..., min_length=1)
    app_version: Optional[str] = None

    @field_validator("user_id", "token", "device_id")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Field cannot be empty or whitespace-only")
        return stripped


class RefreshDeviceTokenRequest(WireModel):
    """Replaces a rotated push token."""

    user_id: str = Field(..., min_length=1)
    old_token: str = Field(..., min_length=1)
    new_token: str = Field(..., min_length=1)


def email_request(
    recipient: str,
    subject: str,
    template_id: str,
    variables: Optional[Dict[str, Any]] = None,
    notification_type: NotificationType = NotificationType.EMAIL_VERIFICATION,
    priority: NotificationPriority = NotificationPriority.NORMAL,
    email_account_name: Optional[str] = None,
    **extra: Any,
) -> SendNotificationRequest:
    """Build an EMAIL request; ``extra`` carries cc/bcc/attachments/scheduled_at."""
    return SendNotificationRequest(
        type=notification_type,
        channel=NotificationChannel.EMAIL,
        recipient=recipient,
        subject=subject,
        template_id=template_id,
        template_variables=variables,
        priority=priority,
        email_account_name=email_account_name,
        **extra,
    )


def sms_request(
    phone_number: str,
    template_id: str,
    variables: Optional[Dict[str, Any]] = None,
    notification_type: NotificationType = NotificationType.SMS_VERIFICATION,
    priority: NotificationPriority = NotificationPriority.NORMAL,
    **extra: Any,
) -> SendNotificationRequest:
    """Build an SMS request; the number must be in international format (+CC...)."""
    return SendNotificationRequest(
        type=notification_type,
        channel=NotificationChannel.SMS,
        recipient=phone_number,
        template_id=template_id,
        template_variables=variables,
        priority=priority,
        **extra,
    )


def push_request(
    recipient: str,
    title: str,
    body: str,
    template_id: str,
    variables: Optional[Dict[str, Any]] = None,
    notification_type: NotificationType = NotificationType.PUSH_NOTIFICATION,
    priority: NotificationPriority = NotificationPriority.NORMAL,
    **extra: Any,
) -> SendNotificationRequest:
    """Build a PUSH request; the recipient is a user id (or a legacy device token)."""
    return SendNotificationRequest(
        type=notification_type,
        channel=NotificationChannel.PUSH,
        recipient=recipient,
        title=title,
        body=body,
        template_id=template_id,
        template_variables=variables,
        priority=priority,
        **extra,
    )
