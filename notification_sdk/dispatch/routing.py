"""Sender account resolution for email notifications.

Precedence:
1. an explicit ``email_account_name`` on the request, used verbatim
2. the sender category declared for the request's notification type
3. the service's default account (nothing attached; the service falls back)
"""

from dataclasses import dataclass
from typing import Dict, Optional

from notification_sdk.domain.catalog import NOTIFICATION_TYPE_PROFILES
from notification_sdk.domain.enums import EmailAccountCategory
from notification_sdk.domain.requests import SendNotificationRequest

SOURCE_EXPLICIT = "explicit"
SOURCE_TYPE = "type"
SOURCE_DEFAULT = "default"


@dataclass(frozen=True)
class EmailAccountSelector:
    """Which sender identity an email should originate from."""

    account_name: Optional[str] = None
    category: Optional[EmailAccountCategory] = None
    source: str = SOURCE_DEFAULT

    @property
    def is_default(self) -> bool:
        return self.source == SOURCE_DEFAULT

    def as_payload(self) -> Dict[str, str]:
        """Routing fields merged into the outgoing request body."""
        if self.account_name is not None:
            return {"emailAccountName": self.account_name}
        if self.category is not None:
            return {"emailAccountCategory": self.category.value}
        return {}


DEFAULT_ACCOUNT = EmailAccountSelector()


def resolve_email_account(request: SendNotificationRequest) -> EmailAccountSelector:
    """Resolve the sender account for a request without touching it.

    Example:
        >>> resolve_email_account(request_of_type_promotional_offer).category
        <EmailAccountCategory.MARKETING: 'MARKETING'>
    """
    if request.email_account_name is not None and request.email_account_name.strip():
        return EmailAccountSelector(account_name=request.email_account_name, source=SOURCE_EXPLICIT)

    profile = NOTIFICATION_TYPE_PROFILES.get(request.type) if request.type is not None else None
    if profile is not None and profile.email_account_category is not None:
        return EmailAccountSelector(category=profile.email_account_category, source=SOURCE_TYPE)

    return DEFAULT_ACCOUNT
