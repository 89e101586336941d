"""Helpers shared by the user use cases"""
# Standard library imports
from typing import Optional

# Local application imports
from ....domain.exceptions import InvalidArgumentError
from ....domain.models.user import User
from ...dto.user_dto import UserResponse


def ensure_valid_user_id(user_id: Optional[int]) -> int:
    """
    Reject missing or non-positive user IDs before touching the repository

    Raises:
        InvalidArgumentError: If user_id is None or <= 0
    """
    if user_id is None or isinstance(user_id, bool) or user_id <= 0:
        raise InvalidArgumentError("User ID must be a positive number")
    return user_id


def to_user_response(user: User) -> UserResponse:
    """Project a persisted user entity onto the response DTO"""
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
