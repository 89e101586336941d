# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import DuplicateEmailError, UserNotFoundError, ValidationFailedError
from ...dto.user_dto import UpdateUserRequest, UserResponse
from ...validators.user_validator import UserValidator
from ._common import ensure_valid_user_id, to_user_response

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating an existing user"""
    
    def __init__(self, user_repository: UserRepository, user_validator: UserValidator) -> None:
        self.user_repository = user_repository
        self.user_validator = user_validator
    
    async def execute(self, user_id: Optional[int], request: Optional[UpdateUserRequest]) -> UserResponse:
        """
        Replace a user's name and email
        
        Args:
            user_id: ID of the user to update
            request: Update request with the new name and email
            
        Returns:
            UserResponse with the updated user
            
        Raises:
            InvalidArgumentError: If user_id is missing or not positive
            ValidationFailedError: If the request breaks any validation rule
            UserNotFoundError: If no user has this ID
            DuplicateEmailError: If another user already has the new email
            InvalidUserStateError: If the entity rejects the values
            StorageInconsistencyError: If the user disappears before the save
        """
        user_id = ensure_valid_user_id(user_id)
        
        validation_result = self.user_validator.validate_for_update(request)
        if not validation_result.valid:
            logger.warning(f"Rejected update of user {user_id}: {validation_result.errors_as_string()}")
            raise ValidationFailedError(validation_result.errors)
        
        existing_user = await self.user_repository.find_by_id(user_id)
        if existing_user is None:
            raise UserNotFoundError(user_id)
        
        # Business rule: keeping your own email is allowed, taking someone else's is not
        if (
            existing_user.email != request.email
            and await self.user_repository.exists_by_email(request.email)
        ):
            logger.warning(f"Rejected update of user {user_id}: email {request.email} already registered")
            raise DuplicateEmailError(request.email, "Another user with this email already exists")
        
        existing_user.update_user(request.name, request.email)
        updated_user = await self.user_repository.save(existing_user)
        
        logger.info(f"Updated user {updated_user.id}")
        return to_user_response(updated_user)
