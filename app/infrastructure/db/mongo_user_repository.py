# Standard library imports
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields, CounterFields
from ...domain.exceptions import DuplicateEmailError, StorageInconsistencyError
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_user_collection, get_counter_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository with integer, auto-incrementing IDs"""

    def __init__(
        self,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        counter_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.counter_collection = counter_collection if counter_collection is not None else get_counter_collection()

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            DuplicateEmailError: If another document already holds this email
            StorageInconsistencyError: If an update matches no document
        """
        if not user:
            raise ValueError("User cannot be None")

        try:
            user_dict = self._user_to_dict(user)

            if user.id is not None:
                # Update existing user
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: user.id},
                    {"$set": {k: v for k, v in user_dict.items() if k != UserFields.MONGO_ID}}
                )

                if update_result.matched_count == 0:
                    # The document was removed after the caller looked it up
                    raise StorageInconsistencyError(user.id, operation="update")

                updated_document = await self.user_collection.find_one({UserFields.MONGO_ID: user.id})
                if updated_document is None:
                    raise RuntimeError(f"User {user.id} was updated but could not be retrieved")

                return self._document_to_user(updated_document)

            # Create new user with the next value of the users sequence
            user_dict[UserFields.MONGO_ID] = await self._next_user_id()
            result = await self.user_collection.insert_one(user_dict)

            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("User was created but could not be retrieved")

            return self._document_to_user(new_document)
        except DuplicateKeyError:
            raise DuplicateEmailError(user.email)
        except (ValueError, RuntimeError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if user_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: user_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")

    async def find_all(self) -> List[User]:
        """List all users ordered by ID"""
        try:
            cursor = self.user_collection.find({}).sort(UserFields.MONGO_ID, ASCENDING)
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error listing users: {str(e)}")

    async def delete_by_id(self, user_id: int) -> bool:
        """Delete user by ID; True iff a document was removed"""
        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: user_id})
            return result.deleted_count > 0
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}")

    async def exists_by_id(self, user_id: int) -> bool:
        """Check if a user with this ID exists"""
        try:
            count = await self.user_collection.count_documents({UserFields.MONGO_ID: user_id}, limit=1)
            return count > 0
        except Exception as e:
            raise RuntimeError(f"Error checking user ID: {str(e)}")

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with this email exists"""
        if not email:
            return False

        try:
            count = await self.user_collection.count_documents({UserFields.EMAIL: email}, limit=1)
            return count > 0
        except Exception as e:
            raise RuntimeError(f"Error checking user email: {str(e)}")

    async def _next_user_id(self) -> int:
        """Atomically increment and return the users sequence"""
        counter = await self.counter_collection.find_one_and_update(
            {CounterFields.MONGO_ID: CounterFields.USERS_SEQUENCE},
            {"$inc": {CounterFields.SEQUENCE_VALUE: 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter[CounterFields.SEQUENCE_VALUE])

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User.rehydrate(
            id=int(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(UserFields.UPDATED_AT)),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.CREATED_AT: user.created_at,
            UserFields.UPDATED_AT: user.updated_at,
        }

        if user.id is not None:
            user_dict[UserFields.MONGO_ID] = user.id

        return user_dict
