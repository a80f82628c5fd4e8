"""Response models returned by the notification service.

The client does not interpret these beyond parsing: identifiers, statuses and
timestamps are passed through to the caller as the service reported them.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from notification_sdk.utils.timestamps import parse_local_datetime

from .enums import (
    NotificationChannel,
    NotificationPriority,
    NotificationStatus,
    NotificationType,
    PlatformType,
)


class ServiceResponse(BaseModel):
    """Base for parsed service responses; unknown fields are ignored."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class NotificationResponse(ServiceResponse):
    """Server-assigned identity and delivery state of one notification."""

    id: Optional[str] = None
    type: Optional[NotificationType] = None
    channel: Optional[NotificationChannel] = None
    recipient: Optional[str] = None
    status: Optional[NotificationStatus] = None
    priority: Optional[NotificationPriority] = None
    retry_count: Optional[int] = None
    error_message: Optional[str] = None
    provider_name: Optional[str] = None
    template_id: Optional[str] = None
    template_variables: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None
    scheduled_at: Optional[datetime] = None

    @field_validator("created_at", "sent_at", "scheduled_at", mode="before")
    @classmethod
    def parse_timestamps(cls, v: Any) -> Any:
        return parse_local_datetime(v) if isinstance(v, str) else v


class BulkNotificationResponse(ServiceResponse):
    """Acknowledgement of a batch; per-item outcomes are tracked server-side."""

    batch_id: Optional[str] = None
    total_count: Optional[int] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, v: Any) -> Any:
        return parse_local_datetime(v) if isinstance(v, str) else v


class DeviceTokenResponse(ServiceResponse):
    """A registered push device."""

    id: Optional[str] = None
    user_id: Optional[str] = None
    platform: Optional[PlatformType] = None
    device_id: Optional[str] = None
    active: bool = False
    registered_at: Optional[datetime] = None

    @field_validator("registered_at", mode="before")
    @classmethod
    def parse_registered_at(cls, v: Any) -> Any:
        return parse_local_datetime(v) if isinstance(v, str) else v
