"""Shared fixtures for notification client tests."""

import pytest

from notification_sdk.config.models import ClientConfig
from notification_sdk.dispatch.dispatcher import Dispatcher
from notification_sdk.dispatch.retry import RetryPolicy
from notification_sdk.domain.requests import email_request, push_request, sms_request
from notification_sdk.logging.context import clear_log_context

from tests.helpers import FakeTransport

SENT_RESPONSE = {
    "id": "notif-123",
    "type": "EMAIL_VERIFICATION",
    "channel": "EMAIL",
    "recipient": "user@example.com",
    "status": "PENDING",
    "priority": "NORMAL",
    "retryCount": 0,
    "templateId": "tmpl-1",
    "createdAt": "2026-01-15T09:30:00",
}


@pytest.fixture(autouse=True)
def clean_log_context():
    """Keep dispatch log context from leaking between tests."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def transport():
    """Transport that accepts every request."""
    return FakeTransport(default=dict(SENT_RESPONSE))


@pytest.fixture
def sleeps():
    """Records backoff waits instead of sleeping."""
    return []


@pytest.fixture
def dispatcher(transport, sleeps):
    """Dispatcher with the default policy: 3 attempts, 1s doubling to 10s."""
    return Dispatcher(transport, RetryPolicy(), sleep=sleeps.append)


@pytest.fixture
def client_config():
    return ClientConfig(base_url="https://notifications.example.com", api_key="secret-key")


@pytest.fixture
def valid_email():
    return email_request("user@example.com", "Verify your email", "tmpl-1", {"code": "123456"})


@pytest.fixture
def valid_sms():
    return sms_request("+12015550123", "sms-tmpl", {"code": "42"})


@pytest.fixture
def valid_push():
    return push_request("user-123", "Match Alert", "Goal!", "match-alert-template")
