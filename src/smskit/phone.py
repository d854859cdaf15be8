"""Recipient phone number validation."""

from __future__ import annotations

import re

from smskit.errors import ValidationError

# Optional leading '+', then 7-15 digits, spaces, hyphens or parentheses.
PHONE_PATTERN = re.compile(r"\+?[0-9 \-()]{7,15}")


def is_valid_phone(number: str) -> bool:
    """Check if *number* matches the accepted phone number format.

    The whole string must match; formatting characters count towards the
    15 character limit.

    Example:
        >>> is_valid_phone("+358 50 123 4567")
        True
        >>> is_valid_phone("12345")
        False
    """
    return isinstance(number, str) and PHONE_PATTERN.fullmatch(number) is not None


def validate_phone(number: str) -> str:
    """Return *number* unchanged if valid.

    Raises:
        ValidationError: If the number does not match the accepted format.
    """
    if not is_valid_phone(number):
        raise ValidationError(f"invalid phone number format: {number}", value=number)
    return number
