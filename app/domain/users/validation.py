"""
Input validation rules for users.

Pure functions, no IO. Each validator returns the normalized value
or raises ValidationError naming the offending field.
"""

import re

from app.domain.users.errors import ValidationError

NAME_MAX_LEN = 100
EMAIL_MAX_LEN = 254
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_name(name: str) -> str:
    """Return the trimmed name, or raise if it is empty or too long."""
    value = name.strip()
    if not value:
        raise ValidationError("name", "Name cannot be empty")
    if len(value) > NAME_MAX_LEN:
        raise ValidationError("name", f"Name must be at most {NAME_MAX_LEN} characters")
    return value


def validate_email(email: str) -> str:
    """Return the trimmed email, or raise if it is not a plausible address."""
    value = email.strip()
    if not value:
        raise ValidationError("email", "Email cannot be empty")
    if len(value) > EMAIL_MAX_LEN:
        raise ValidationError("email", f"Email must be at most {EMAIL_MAX_LEN} characters")
    if not EMAIL_PATTERN.match(value):
        raise ValidationError("email", "Invalid email format")
    return value
