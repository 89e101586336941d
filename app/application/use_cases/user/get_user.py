# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...dto.user_dto import UserResponse
from ._common import ensure_valid_user_id, to_user_response


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: Optional[int]) -> UserResponse:
        """
        Get a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            UserResponse with user information
            
        Raises:
            InvalidArgumentError: If user_id is missing or not positive
            UserNotFoundError: If no user has this ID
        """
        user_id = ensure_valid_user_id(user_id)
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        
        return to_user_response(user)
