"""
Business validation for user create/update requests.

Rules are applied on top of the request schema: every broken rule is
reported, in a fixed order, except a missing request which short-circuits.
"""
# Standard library imports
from dataclasses import dataclass
from string import whitespace
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union

# Local application imports
from ...domain.constants import (
    EMAIL_PATTERN,
    NAME_PATTERN,
    NAME_MIN_LENGTH,
    NAME_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    DEFAULT_DISPOSABLE_EMAIL_DOMAINS,
    ValidationMessages,
)
from ..dto.user_dto import CreateUserRequest, UpdateUserRequest

UserRequest = Union[CreateUserRequest, UpdateUserRequest]


def _trim(value: str) -> str:
    # ASCII whitespace only; NBSP and control characters stay and fail the patterns
    return value.strip(whitespace)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single validation call"""
    valid: bool
    errors: Tuple[str, ...] = ()

    @classmethod
    def from_errors(cls, errors: Iterable[str]) -> "ValidationResult":
        collected = tuple(errors)
        return cls(valid=not collected, errors=collected)

    def errors_as_string(self) -> str:
        return "; ".join(self.errors)


class UserValidator:
    """Stateless rule checker for user input"""

    def __init__(self, disposable_domains: Optional[Iterable[str]] = None) -> None:
        domains = disposable_domains if disposable_domains is not None else DEFAULT_DISPOSABLE_EMAIL_DOMAINS
        self.disposable_domains: FrozenSet[str] = frozenset(domain.strip().lower() for domain in domains)

    def validate_for_create(self, request: Optional[CreateUserRequest]) -> ValidationResult:
        return self._validate(request)

    def validate_for_update(self, request: Optional[UpdateUserRequest]) -> ValidationResult:
        return self._validate(request)

    def _validate(self, request: Optional[UserRequest]) -> ValidationResult:
        if request is None:
            return ValidationResult.from_errors([ValidationMessages.NULL_REQUEST])

        errors: List[str] = []

        if request.name is None or not _trim(request.name):
            errors.append(ValidationMessages.NAME_REQUIRED)
        else:
            self._validate_name(request.name, errors)

        if request.email is None or not _trim(request.email):
            errors.append(ValidationMessages.EMAIL_REQUIRED)
        else:
            self._validate_email(request.email, errors)

        return ValidationResult.from_errors(errors)

    def _validate_name(self, name: str, errors: List[str]) -> None:
        trimmed_name = _trim(name)

        if len(trimmed_name) < NAME_MIN_LENGTH:
            errors.append(ValidationMessages.NAME_TOO_SHORT)

        if len(trimmed_name) > NAME_MAX_LENGTH:
            errors.append(ValidationMessages.NAME_TOO_LONG)

        if not NAME_PATTERN.fullmatch(trimmed_name):
            errors.append(ValidationMessages.NAME_INVALID_CHARACTERS)

        if "  " in trimmed_name:
            errors.append(ValidationMessages.NAME_CONSECUTIVE_SPACES)

    def _validate_email(self, email: str, errors: List[str]) -> None:
        normalized_email = _trim(email).lower()

        if len(normalized_email) > EMAIL_MAX_LENGTH:
            errors.append(ValidationMessages.EMAIL_TOO_LONG)

        if not EMAIL_PATTERN.fullmatch(normalized_email):
            errors.append(ValidationMessages.EMAIL_INVALID_FORMAT)

        if any(normalized_email.endswith(f"@{domain}") for domain in self.disposable_domains):
            errors.append(ValidationMessages.EMAIL_DISPOSABLE)
