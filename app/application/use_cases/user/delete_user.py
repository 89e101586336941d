# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import StorageInconsistencyError, UserNotFoundError
from ._common import ensure_valid_user_id

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: Optional[int]) -> None:
        """
        Delete a user by ID
        
        Raises:
            InvalidArgumentError: If user_id is missing or not positive
            UserNotFoundError: If no user has this ID
            StorageInconsistencyError: If the user existed but the delete removed nothing
        """
        user_id = ensure_valid_user_id(user_id)
        
        if not await self.user_repository.exists_by_id(user_id):
            raise UserNotFoundError(user_id)
        
        deleted = await self.user_repository.delete_by_id(user_id)
        if not deleted:
            logger.error(f"User {user_id} passed the existence check but was not deleted")
            raise StorageInconsistencyError(user_id)
        
        logger.info(f"Deleted user {user_id}")
