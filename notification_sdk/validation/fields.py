"""Recipient format predicates.

Pure functions with no I/O: email syntax is checked with a grammar regex plus
email-validator's syntax rules (deliverability lookups disabled), phone numbers
with the phonenumbers port of libphonenumber, which carries the current
country numbering plans.
"""

import re
from typing import Any

import phonenumbers
from email_validator import EmailNotValidError, validate_email

# local-part @ domain, domain ending in a dotted TLD of at least two letters
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

MIN_PUSH_RECIPIENT_LENGTH = 3


def is_valid_email(email: Any) -> bool:
    """Check an email address.

    Example:
        >>> is_valid_email("user@example.com")
        True
        >>> is_valid_email("not-an-email")
        False
    """
    if not isinstance(email, str) or not EMAIL_PATTERN.match(email):
        return False

    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_phone_number(phone_number: Any) -> bool:
    """Check a phone number given in international format (``+<country><number>``).

    No default region is assumed, so national-format numbers are rejected.

    Example:
        >>> is_valid_phone_number("+12015550123")
        True
        >>> is_valid_phone_number("12345")
        False
    """
    if not isinstance(phone_number, str) or not phone_number.strip():
        return False

    try:
        parsed = phonenumbers.parse(phone_number, None)
    except phonenumbers.NumberParseException:
        return False
    return phonenumbers.is_valid_number(parsed)


def is_valid_push_recipient(recipient: Any) -> bool:
    """Accept a user id or a legacy device token.

    Intentionally permissive: short user ids and long device tokens both pass
    for backward compatibility; only values shorter than three characters
    are rejected.
    """
    return isinstance(recipient, str) and len(recipient) >= MIN_PUSH_RECIPIENT_LENGTH
