# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import DuplicateEmailError
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def ensure_indexes(self) -> None:
        """
        Create a unique index on email
        
        With the index in place two concurrent signups for the same email
        cannot both be persisted; the second insert fails with
        DuplicateKeyError, surfaced as DuplicateEmailError by save().
        """
        try:
            await self.user_collection.create_index(
                UserFields.EMAIL,
                unique=True,
                name=UserFields.EMAIL_UNIQUE_INDEX,
            )
            logger.info(f"Ensured unique index '{UserFields.EMAIL_UNIQUE_INDEX}' on users collection")
        except Exception as e:
            raise RuntimeError(f"Error creating user indexes: {str(e)}")
    
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
    
    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)
        
        Args:
            user: User domain model to save
            
        Returns:
            Saved User domain model with ID set
            
        Raises:
            DuplicateEmailError: If the email is already taken by another record
        """
        if not user:
            raise ValueError("User cannot be None")
        
        try:
            user_dict = self._user_to_dict(user)
            
            if user.id:
                # Update existing user
                try:
                    object_id = ObjectId(user.id)
                except (InvalidId, TypeError):
                    raise ValueError(f"Invalid user ID format: {user.id}")
                
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": {k: v for k, v in user_dict.items() if k != UserFields.MONGO_ID}}
                )
                
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")
                
                # Fetch and return updated document
                updated_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
                if updated_document is None:
                    raise RuntimeError(f"User {user.id} was updated but could not be retrieved")
                
                return self._document_to_user(updated_document)
            
            # Create new user
            user_dict.pop(UserFields.MONGO_ID, None)
            
            result = await self.user_collection.insert_one(user_dict)
            
            # Fetch and return the newly created document
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
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.PASSWORD, ""),
            image=document.get(UserFields.IMAGE),
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document
        
        Args:
            user: User domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        user_dict = {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.hashed_password,
            UserFields.IMAGE: user.image,
        }
        
        # Only include _id if user.id is valid
        if user.id:
            try:
                user_dict[UserFields.MONGO_ID] = ObjectId(user.id)
            except (InvalidId, TypeError):
                # Invalid ids are rejected by save() before they reach the store
                pass
        
        return user_dict
