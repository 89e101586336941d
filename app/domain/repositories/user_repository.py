from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.

    Every call is atomic on its own; callers get no transaction spanning
    several calls. Storage failures propagate as RuntimeError.
    """
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Save user (insert when id is None, otherwise update in place)

        Returns the persisted user with its id populated. Raises
        DuplicateEmailError if the storage rejects the email as taken.
        """
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user ordered by ID"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, user_id: int) -> bool:
        """Delete user by ID; True iff a user existed and was removed"""
        pass
    
    @abstractmethod
    async def exists_by_id(self, user_id: int) -> bool:
        """Check whether a user with this ID exists"""
        pass
    
    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether a user with this email exists"""
        pass
