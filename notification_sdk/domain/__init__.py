"""Domain models: enums, the notification type table, requests and responses."""

from .catalog import (
    NOTIFICATION_TYPE_PROFILES,
    NotificationTypeProfile,
    default_channel_for,
    email_account_category_for,
    get_type_profile,
    uses_email_account_category,
)
from .enums import (
    EmailAccountCategory,
    NotificationChannel,
    NotificationPriority,
    NotificationStatus,
    NotificationType,
    PlatformType,
)
from .requests import (
    BulkNotificationRequest,
    RefreshDeviceTokenRequest,
    RegisterDeviceTokenRequest,
    SendNotificationRequest,
    email_request,
    push_request,
    sms_request,
)
from .responses import BulkNotificationResponse, DeviceTokenResponse, NotificationResponse

__all__ = [
    # Enums
    "EmailAccountCategory",
    "NotificationChannel",
    "NotificationPriority",
    "NotificationStatus",
    "NotificationType",
    "PlatformType",
    # Type table
    "NOTIFICATION_TYPE_PROFILES",
    "NotificationTypeProfile",
    "get_type_profile",
    "default_channel_for",
    "email_account_category_for",
    "uses_email_account_category",
    # Requests
    "SendNotificationRequest",
    "BulkNotificationRequest",
    "RegisterDeviceTokenRequest",
    "RefreshDeviceTokenRequest",
    "email_request",
    "sms_request",
    "push_request",
    # Responses
    "NotificationResponse",
    "BulkNotificationResponse",
    "DeviceTokenResponse",
]
