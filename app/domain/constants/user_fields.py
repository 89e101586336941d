"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field, holds the integer user ID


class CounterFields:
    """Field name constants for the sequence counters collection"""
    MONGO_ID = "_id"
    SEQUENCE_VALUE = "seq"
    
    USERS_SEQUENCE = "users"
