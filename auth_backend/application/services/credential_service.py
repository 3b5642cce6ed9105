"""
Credential service: email uniqueness, password hashing and verification.

Sits between the auth use cases and the UserRepository. Plaintext passwords
never leave this module; only bcrypt hashes are handed to the store.
"""
# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi.concurrency import run_in_threadpool

# Local application imports
from ...core.security import hash_password, verify_password
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CredentialService:
    """Business rules for registering and authenticating users"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def check_email_exists(self, email: str) -> bool:
        """
        Check whether a user is already registered with this email
        
        Args:
            email: Email address to look up
            
        Returns:
            True if a record exists, False otherwise
        """
        return await self.user_repository.find_by_email(email) is not None
    
    async def register_user(
        self,
        *,
        name: str,
        email: str,
        password: str,
        image: Optional[str] = None,
    ) -> None:
        """
        Hash the password and persist a new user
        
        Callers are expected to have checked check_email_exists() first; the
        store's unique index still rejects a duplicate that slips through.
        
        Raises:
            DuplicateEmailError: If the email was taken concurrently
        """
        # bcrypt is CPU-bound; keep it off the event loop
        hashed_password = await run_in_threadpool(hash_password, password)
        new_user = User(
            id=None,  # Will be set by repository
            name=name,
            email=email,
            hashed_password=hashed_password,
            image=image,
        )
        saved_user = await self.user_repository.save(new_user)
        logger.debug(f"Persisted user {saved_user.id}")
    
    async def authenticate(self, email: str, password: str) -> Optional[User]:
        """
        Verify an email/password pair
        
        Args:
            email: Email address of the account
            password: Plain text password supplied by the caller
            
        Returns:
            The stored User on a match, None for an unknown email or a wrong
            password alike
        """
        user = await self.user_repository.find_by_email(email)
        if user is None:
            return None
        
        if not await run_in_threadpool(verify_password, password, user.hashed_password):
            return None
        
        return user
