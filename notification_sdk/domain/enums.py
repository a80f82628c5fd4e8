"""Enumerations shared by requests and responses.

Values are the exact strings exchanged with the notification service.
EmailAccountCategory and NotificationType are part of the wire contract:
members may be added but never renamed or removed.
"""

from enum import Enum


class NotificationChannel(str, Enum):
    """Delivery medium."""

    EMAIL = "EMAIL"
    SMS = "SMS"
    PUSH = "PUSH"


class NotificationPriority(str, Enum):
    """Delivery priority; NORMAL unless the caller says otherwise."""

    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    URGENT = "URGENT"


class NotificationStatus(str, Enum):
    """Server-side delivery state reported back in responses."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SENT = "SENT"
    FAILED = "FAILED"
    RETRY = "RETRY"
    CANCELLED = "CANCELLED"


class PlatformType(str, Enum):
    """Push platform a device token belongs to."""

    ANDROID = "ANDROID"  # Firebase Cloud Messaging
    IOS = "IOS"  # Apple Push Notification Service
    WEB = "WEB"  # Firebase Cloud Messaging


class EmailAccountCategory(str, Enum):
    """Logical sender identity for outgoing email.

    The service maps each category to a concrete mailbox:
    NOTIFICATIONS for transactional no-reply mail (auth, KYC, receipts),
    MARKETING for campaigns and offers, SUPPORT for reply-enabled compliance
    and customer mail, INFORMATIONAL for policy updates and announcements.
    """

    NOTIFICATIONS = "NOTIFICATIONS"
    MARKETING = "MARKETING"
    SUPPORT = "SUPPORT"
    INFORMATIONAL = "INFORMATIONAL"


class NotificationType(str, Enum):
    """Closed catalog of business use-cases.

    Per-type attributes (default channel, display name, sender category) live
    in ``notification_sdk.domain.catalog``.
    """

    PUSH_NOTIFICATION = "PUSH_NOTIFICATION"

    # Account & auth
    EMAIL_VERIFICATION = "EMAIL_VERIFICATION"
    PASSWORD_RESET = "PASSWORD_RESET"
    WELCOME_EMAIL = "WELCOME_EMAIL"

    # Transactions
    TRANSACTION_RECEIPT = "TRANSACTION_RECEIPT"
    SMS_TRANSACTION_ALERT = "SMS_TRANSACTION_ALERT"

    # Subscriptions & promotions
    SUBSCRIPTION_EXPIRING = "SUBSCRIPTION_EXPIRING"
    PROMOTIONAL_OFFER = "PROMOTIONAL_OFFER"
    SMS_PROMOTIONAL_OFFER = "SMS_PROMOTIONAL_OFFER"
    PUSH_PROMOTIONAL = "PUSH_PROMOTIONAL"

    # Sports & betting
    MATCH_TICKET_AVAILABLE = "MATCH_TICKET_AVAILABLE"
    SMS_MATCH_REMINDER = "SMS_MATCH_REMINDER"
    PUSH_MATCH_UPDATE = "PUSH_MATCH_UPDATE"
    PUSH_BET_UPDATE = "PUSH_BET_UPDATE"

    # Security
    SMS_VERIFICATION = "SMS_VERIFICATION"
    SMS_SECURITY_ALERT = "SMS_SECURITY_ALERT"

    # KYC, user facing
    KYC_SUBMITTED = "KYC_SUBMITTED"
    KYC_APPROVED = "KYC_APPROVED"
    KYC_REJECTED = "KYC_REJECTED"
    KYC_RESUBMISSION_REQUIRED = "KYC_RESUBMISSION_REQUIRED"
    KYC_DOCUMENT_EXPIRING = "KYC_DOCUMENT_EXPIRING"

    # KYC, admin & compliance
    KYC_REVIEW_REQUIRED = "KYC_REVIEW_REQUIRED"
    KYC_MANUAL_VERIFICATION = "KYC_MANUAL_VERIFICATION"
    KYC_SLA_BREACH = "KYC_SLA_BREACH"

    # System & maintenance
    SYSTEM_MAINTENANCE_SCHEDULED = "SYSTEM_MAINTENANCE_SCHEDULED"
    SYSTEM_MAINTENANCE_STARTED = "SYSTEM_MAINTENANCE_STARTED"
    SYSTEM_MAINTENANCE_COMPLETED = "SYSTEM_MAINTENANCE_COMPLETED"
    SYSTEM_OUTAGE = "SYSTEM_OUTAGE"
    SYSTEM_RECOVERY = "SYSTEM_RECOVERY"
