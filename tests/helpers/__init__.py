"""Test helper utilities for notification client tests."""

from .fake_transport import (
    FakeTransport,
    RecordedCall,
    connection_error,
    http_error,
    timeout_error,
)

__all__ = ["FakeTransport", "RecordedCall", "http_error", "timeout_error", "connection_error"]
