"""Local validation run before any request leaves the process."""

from .fields import (
    EMAIL_PATTERN,
    MIN_PUSH_RECIPIENT_LENGTH,
    is_valid_email,
    is_valid_phone_number,
    is_valid_push_recipient,
)
from .request_validator import validate_request, validate_requests

__all__ = [
    "validate_request",
    "validate_requests",
    "is_valid_email",
    "is_valid_phone_number",
    "is_valid_push_recipient",
    "EMAIL_PATTERN",
    "MIN_PUSH_RECIPIENT_LENGTH",
]
