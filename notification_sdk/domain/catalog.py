"""Static attribute table for NotificationType.

Each type declares the channel it is normally sent on, a display name and,
for email types, the sender category the service should use. The table is
read-only and shared by every dispatch.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .enums import EmailAccountCategory, NotificationChannel, NotificationType

_EMAIL = NotificationChannel.EMAIL
_SMS = NotificationChannel.SMS
_PUSH = NotificationChannel.PUSH

_NOTIFICATIONS = EmailAccountCategory.NOTIFICATIONS
_MARKETING = EmailAccountCategory.MARKETING
_SUPPORT = EmailAccountCategory.SUPPORT


@dataclass(frozen=True)
class NotificationTypeProfile:
    """Attributes declared for a notification type."""

    default_channel: NotificationChannel
    display_name: str
    email_account_category: Optional[EmailAccountCategory] = None

    @property
    def uses_email_account_category(self) -> bool:
        return (
            self.default_channel == NotificationChannel.EMAIL
            and self.email_account_category is not None
        )


NOTIFICATION_TYPE_PROFILES: Mapping[NotificationType, NotificationTypeProfile] = MappingProxyType({
    NotificationType.PUSH_NOTIFICATION: NotificationTypeProfile(_PUSH, "Generic Push Notification"),
    NotificationType.EMAIL_VERIFICATION: NotificationTypeProfile(_EMAIL, "Email Verification", _NOTIFICATIONS),
    NotificationType.PASSWORD_RESET: NotificationTypeProfile(_EMAIL, "Password Reset", _NOTIFICATIONS),
    NotificationType.WELCOME_EMAIL: NotificationTypeProfile(_EMAIL, "Welcome Email", _NOTIFICATIONS),
    NotificationType.TRANSACTION_RECEIPT: NotificationTypeProfile(_EMAIL, "Transaction Receipt", _NOTIFICATIONS),
    NotificationType.SMS_TRANSACTION_ALERT: NotificationTypeProfile(_SMS, "Transaction Alert"),
    NotificationType.SUBSCRIPTION_EXPIRING: NotificationTypeProfile(_EMAIL, "Subscription Expiring", _NOTIFICATIONS),
    NotificationType.PROMOTIONAL_OFFER: NotificationTypeProfile(_EMAIL, "Promotional Offer", _MARKETING),
    NotificationType.SMS_PROMOTIONAL_OFFER: NotificationTypeProfile(_SMS, "Promotional Offer"),
    NotificationType.PUSH_PROMOTIONAL: NotificationTypeProfile(_PUSH, "Promotional Notification"),
    NotificationType.MATCH_TICKET_AVAILABLE: NotificationTypeProfile(_EMAIL, "Match Ticket Available", _MARKETING),
    NotificationType.SMS_MATCH_REMINDER: NotificationTypeProfile(_SMS, "Match Reminder"),
    NotificationType.PUSH_MATCH_UPDATE: NotificationTypeProfile(_PUSH, "Match Update"),
    NotificationType.PUSH_BET_UPDATE: NotificationTypeProfile(_PUSH, "Bet Update"),
    NotificationType.SMS_VERIFICATION: NotificationTypeProfile(_SMS, "SMS Verification"),
    NotificationType.SMS_SECURITY_ALERT: NotificationTypeProfile(_SMS, "Security Alert"),
    NotificationType.KYC_SUBMITTED: NotificationTypeProfile(_EMAIL, "KYC Submitted", _NOTIFICATIONS),
    NotificationType.KYC_APPROVED: NotificationTypeProfile(_EMAIL, "KYC Approved", _NOTIFICATIONS),
    NotificationType.KYC_REJECTED: NotificationTypeProfile(_EMAIL, "KYC Rejected", _NOTIFICATIONS),
    NotificationType.KYC_RESUBMISSION_REQUIRED: NotificationTypeProfile(
        _EMAIL, "KYC Resubmission Required", _NOTIFICATIONS
    ),
    NotificationType.KYC_DOCUMENT_EXPIRING: NotificationTypeProfile(_EMAIL, "KYC Document Expiring", _NOTIFICATIONS),
    NotificationType.KYC_REVIEW_REQUIRED: NotificationTypeProfile(_EMAIL, "KYC Review Required", _SUPPORT),
    NotificationType.KYC_MANUAL_VERIFICATION: NotificationTypeProfile(_EMAIL, "KYC Manual Verification", _SUPPORT),
    NotificationType.KYC_SLA_BREACH: NotificationTypeProfile(_EMAIL, "KYC SLA Breach", _SUPPORT),
    NotificationType.SYSTEM_MAINTENANCE_SCHEDULED: NotificationTypeProfile(
        _EMAIL, "Scheduled Maintenance", _NOTIFICATIONS
    ),
    NotificationType.SYSTEM_MAINTENANCE_STARTED: NotificationTypeProfile(_PUSH, "Maintenance Started"),
    NotificationType.SYSTEM_MAINTENANCE_COMPLETED: NotificationTypeProfile(_PUSH, "Maintenance Completed"),
    NotificationType.SYSTEM_OUTAGE: NotificationTypeProfile(_SMS, "System Outage"),
    NotificationType.SYSTEM_RECOVERY: NotificationTypeProfile(_SMS, "System Recovery"),
})


def get_type_profile(notification_type: NotificationType) -> NotificationTypeProfile:
    """Return the declared attributes of a notification type.

    Raises:
        KeyError: If the type has no entry (only possible for a value added to
            the enum without a matching table row)
    """
    return NOTIFICATION_TYPE_PROFILES[NotificationType(notification_type)]


def default_channel_for(notification_type: NotificationType) -> NotificationChannel:
    return get_type_profile(notification_type).default_channel


def email_account_category_for(
    notification_type: NotificationType,
) -> Optional[EmailAccountCategory]:
    """Sender category suggested by the type, None for non-email types."""
    return get_type_profile(notification_type).email_account_category


def uses_email_account_category(notification_type: NotificationType) -> bool:
    return get_type_profile(notification_type).uses_email_account_category
