from .user_dto import CreateUserRequest, UpdateUserRequest, UserResponse

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
]
