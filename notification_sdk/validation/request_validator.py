"""Pre-flight validation of notification requests.

Validation is synchronous and local. The first failing rule raises a
NotificationValidationError; nothing is sent for an invalid request.

Rule order:
1. the request exists
2. type, channel, recipient and template id are present (strings non-blank)
3. the recipient matches the channel (email, E.164 phone, push id/token)
4. channel-specific fields: subject for EMAIL, title and body for PUSH
"""

from typing import Optional, Sequence

from notification_sdk.domain.enums import NotificationChannel
from notification_sdk.domain.requests import SendNotificationRequest
from notification_sdk.exceptions import NotificationValidationError

from .fields import is_valid_email, is_valid_phone_number, is_valid_push_recipient


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_request(request: Optional[SendNotificationRequest]) -> None:
    """Validate a single notification request.

    Args:
        request: Request to check

    Raises:
        NotificationValidationError: On the first rule that fails; ``field``
            names the offending request field
    """
    if request is None:
        raise NotificationValidationError("Request cannot be null")

    if request.type is None:
        raise NotificationValidationError("Notification type is required", field="type")

    if request.channel is None:
        raise NotificationValidationError("Channel is required", field="channel")

    if _is_blank(request.recipient):
        raise NotificationValidationError("Recipient is required", field="recipient")

    if _is_blank(request.template_id):
        raise NotificationValidationError("Template ID is required", field="template_id")

    _validate_recipient(request.channel, request.recipient)

    if request.channel == NotificationChannel.EMAIL and _is_blank(request.subject):
        raise NotificationValidationError(
            "Subject is required for email notifications", field="subject"
        )

    if request.channel == NotificationChannel.PUSH:
        if _is_blank(request.title):
            raise NotificationValidationError(
                "Title is required for push notifications", field="title"
            )
        if _is_blank(request.body):
            raise NotificationValidationError(
                "Body is required for push notifications", field="body"
            )


def _validate_recipient(channel: NotificationChannel, recipient: str) -> None:
    if channel == NotificationChannel.EMAIL:
        if not is_valid_email(recipient):
            raise NotificationValidationError(
                f"Invalid email address: {recipient}", field="recipient"
            )
    elif channel == NotificationChannel.SMS:
        if not is_valid_phone_number(recipient):
            raise NotificationValidationError(
                f"Invalid phone number: {recipient}", field="recipient"
            )
    elif channel == NotificationChannel.PUSH:
        if not is_valid_push_recipient(recipient):
            raise NotificationValidationError(
                "Invalid recipient: must be user ID or device token", field="recipient"
            )


def validate_requests(requests: Optional[Sequence[SendNotificationRequest]]) -> None:
    """Validate every entry of a batch before anything is sent.

    Raises:
        NotificationValidationError: If the batch is empty, or for the first
            invalid entry (``index`` set to its position)
    """
    if not requests:
        raise NotificationValidationError(
            "Notifications list cannot be empty", field="notifications"
        )

    for index, request in enumerate(requests):
        try:
            validate_request(request)
        except NotificationValidationError as e:
            raise NotificationValidationError(
                f"Notification at index {index}: {e.message}",
                field=e.field,
                index=index,
            ) from e
