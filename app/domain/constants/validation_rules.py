"""Process-wide validation rules for User input"""

# Standard library imports
import re
from typing import Final, FrozenSet, Pattern


EMAIL_PATTERN: Final[Pattern[str]] = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
)

# Letters (including accented Latin letters) and ASCII whitespace only
NAME_PATTERN: Final[Pattern[str]] = re.compile(r"^[a-zA-ZÀ-ÿ\s]+$", re.ASCII)

NAME_MIN_LENGTH: Final[int] = 2
NAME_MAX_LENGTH: Final[int] = 100
EMAIL_MAX_LENGTH: Final[int] = 254

DEFAULT_DISPOSABLE_EMAIL_DOMAINS: Final[FrozenSet[str]] = frozenset({
    "10minutemail.com",
    "tempmail.org",
    "guerrillamail.com",
})


class ValidationMessages:
    """Human-readable messages produced by the validator"""
    NULL_REQUEST = "User request cannot be null"
    
    NAME_REQUIRED = "Name is required"
    NAME_TOO_SHORT = f"Name must be at least {NAME_MIN_LENGTH} characters long"
    NAME_TOO_LONG = f"Name must not exceed {NAME_MAX_LENGTH} characters"
    NAME_INVALID_CHARACTERS = "Name must contain only letters and spaces"
    NAME_CONSECUTIVE_SPACES = "Name cannot contain consecutive spaces"
    
    EMAIL_REQUIRED = "Email is required"
    EMAIL_TOO_LONG = f"Email must not exceed {EMAIL_MAX_LENGTH} characters"
    EMAIL_INVALID_FORMAT = "Email format is invalid"
    EMAIL_DISPOSABLE = "Disposable email addresses are not allowed"
