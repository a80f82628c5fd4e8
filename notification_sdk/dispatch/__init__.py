"""Dispatch pipeline: sender routing, retry policy, error classification.

    from notification_sdk.dispatch import Dispatcher, RetryPolicy
    dispatcher = Dispatcher(transport, RetryPolicy(max_attempts=3))
    response = dispatcher.send(request)
"""

from .classifier import STATUS_ERROR_KINDS, classify, error_kind_for_status
from .dispatcher import BULK_NOTIFICATIONS_PATH, NOTIFICATIONS_PATH, Dispatcher
from .retry import RetryPolicy, is_transient
from .routing import DEFAULT_ACCOUNT, EmailAccountSelector, resolve_email_account

__all__ = [
    "Dispatcher",
    "NOTIFICATIONS_PATH",
    "BULK_NOTIFICATIONS_PATH",
    "RetryPolicy",
    "is_transient",
    "classify",
    "error_kind_for_status",
    "STATUS_ERROR_KINDS",
    "EmailAccountSelector",
    "DEFAULT_ACCOUNT",
    "resolve_email_account",
]
