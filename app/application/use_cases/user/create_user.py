# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import DuplicateEmailError, ValidationFailedError
from ...dto.user_dto import CreateUserRequest, UserResponse
from ...validators.user_validator import UserValidator
from ._common import to_user_response

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository, user_validator: UserValidator) -> None:
        self.user_repository = user_repository
        self.user_validator = user_validator
    
    async def execute(self, request: Optional[CreateUserRequest]) -> UserResponse:
        """
        Create a new user
        
        Args:
            request: Creation request with name and email
            
        Returns:
            UserResponse with the persisted user, including its new ID
            
        Raises:
            ValidationFailedError: If the request breaks any validation rule
            DuplicateEmailError: If the email is already registered
            InvalidUserStateError: If the entity rejects the values
        """
        validation_result = self.user_validator.validate_for_create(request)
        if not validation_result.valid:
            logger.warning(f"Rejected user creation: {validation_result.errors_as_string()}")
            raise ValidationFailedError(validation_result.errors)
        
        # Business rule: email must be unique
        if await self.user_repository.exists_by_email(request.email):
            logger.warning(f"Rejected user creation: email {request.email} already registered")
            raise DuplicateEmailError(request.email)
        
        new_user = User(name=request.name, email=request.email)
        saved_user = await self.user_repository.save(new_user)
        
        logger.info(f"Created user {saved_user.id}")
        return to_user_response(saved_user)
