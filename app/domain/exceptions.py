"""
Exception hierarchy for the User service.

Every error raised by the domain and the use cases inherits from
UserServiceError. The API layer maps each concrete type to an HTTP status.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional, Sequence


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserServiceError(Exception):
    """Base exception for all User service errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationFailedError(UserServiceError, ValueError):
    """Raised when a create/update request fails the validator rules."""

    def __init__(self, errors: Sequence[str]):
        self.errors: List[str] = list(errors)
        super().__init__(
            f"Validation failed: {'; '.join(self.errors)}",
            details={"errors": self.errors},
        )


class InvalidUserStateError(UserServiceError, ValueError):
    """Raised when a User entity would be left in an invalid state."""
    pass


class InvalidArgumentError(UserServiceError, ValueError):
    """Raised when an argument such as a user ID is out of range."""
    pass


class DuplicateEmailError(UserServiceError):
    """Raised when an email is already registered to another user."""

    def __init__(self, email: Optional[str], message: Optional[str] = None):
        self.email = email
        super().__init__(
            message or "User with this email already exists",
            details={"email": email},
        )


class UserNotFoundError(UserServiceError, LookupError):
    """Raised when no user exists with the requested ID."""

    def __init__(self, user_id: Any):
        self.user_id = user_id
        super().__init__(
            f"User not found with ID: {user_id}",
            details={"user_id": user_id},
        )


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class StorageInconsistencyError(UserServiceError, RuntimeError):
    """
    Raised when the repository contradicts itself, e.g. an existence check
    passed but the delete reported that nothing was removed.
    """

    def __init__(self, user_id: Any, operation: str = "delete"):
        self.user_id = user_id
        self.operation = operation
        super().__init__(
            f"Failed to {operation} user with ID: {user_id}",
            details={"user_id": user_id, "operation": operation},
        )
