"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PASSWORD = "password"  # stored value is always a bcrypt hash
    IMAGE = "image"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    EMAIL_UNIQUE_INDEX = "email_unique"
