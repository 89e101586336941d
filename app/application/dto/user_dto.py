from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CreateUserRequest(BaseModel):
    """DTO for user creation request (rules are enforced by UserValidator)"""
    name: Optional[str] = None
    email: Optional[str] = None


class UpdateUserRequest(BaseModel):
    """DTO for user update request (rules are enforced by UserValidator)"""
    name: Optional[str] = None
    email: Optional[str] = None


class UserResponse(BaseModel):
    """Read-only projection of a persisted user"""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
