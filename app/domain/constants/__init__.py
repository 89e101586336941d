"""Constants for domain model field names and validation rules"""

from .user_fields import UserFields, CounterFields
from .validation_rules import (
    EMAIL_PATTERN,
    NAME_PATTERN,
    NAME_MIN_LENGTH,
    NAME_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    DEFAULT_DISPOSABLE_EMAIL_DOMAINS,
    ValidationMessages,
)

__all__ = [
    "UserFields",
    "CounterFields",
    "EMAIL_PATTERN",
    "NAME_PATTERN",
    "NAME_MIN_LENGTH",
    "NAME_MAX_LENGTH",
    "EMAIL_MAX_LENGTH",
    "DEFAULT_DISPOSABLE_EMAIL_DOMAINS",
    "ValidationMessages",
]
