# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_counter_collection() -> AsyncIOMotorCollection:
    """
    Get counters collection from MongoDB (integer ID sequences)
    
    Returns:
        MongoDB collection for sequence counters
    """
    return get_database()["counters"]


async def ensure_user_indexes(user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
    """
    Create the unique email index on the users collection.
    
    The index is what actually guarantees email uniqueness when two requests
    race past the use-case existence check.
    """
    collection = user_collection if user_collection is not None else get_user_collection()
    await collection.create_index(
        [(UserFields.EMAIL, ASCENDING)],
        unique=True,
        name="uniq_user_email",
    )
    logger.info("Ensured unique email index on users collection")


def close_database() -> None:
    """Close the MongoDB client and reset the singletons"""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None
