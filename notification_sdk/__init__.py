"""Python client for the notification service.

Validates requests locally, routes emails to the right sender account,
retries transient failures with exponential backoff and maps service
errors onto a typed exception hierarchy.
"""

__version__ = "1.1.0"

from .client import NotificationServiceClient, create_client
from .config import ClientConfig, ConfigurationError
from .domain import (
    EmailAccountCategory,
    NotificationChannel,
    NotificationPriority,
    NotificationStatus,
    NotificationType,
    PlatformType,
    SendNotificationRequest,
    email_request,
    push_request,
    sms_request,
)
from .exceptions import (
    AuthenticationError,
    DispatchCancelledError,
    ErrorKind,
    GenericClientError,
    NotificationClientError,
    NotificationNotFoundError,
    NotificationResponseError,
    NotificationValidationError,
    RateLimitExceededError,
    ServiceUnavailableError,
)

__all__ = [
    "__version__",
    "NotificationServiceClient",
    "create_client",
    "ClientConfig",
    "ConfigurationError",
    "EmailAccountCategory",
    "NotificationChannel",
    "NotificationPriority",
    "NotificationStatus",
    "NotificationType",
    "PlatformType",
    "SendNotificationRequest",
    "email_request",
    "sms_request",
    "push_request",
    "ErrorKind",
    "NotificationClientError",
    "NotificationValidationError",
    "NotificationNotFoundError",
    "AuthenticationError",
    "RateLimitExceededError",
    "ServiceUnavailableError",
    "GenericClientError",
    "NotificationResponseError",
    "DispatchCancelledError",
]
