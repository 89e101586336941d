from .user_validator import UserValidator, ValidationResult

__all__ = ["UserValidator", "ValidationResult"]
