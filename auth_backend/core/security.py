# Standard library imports
from typing import Optional

# External package imports
import bcrypt

# Local application imports
from .config import get_settings


# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def password_exceeds_limit(plain_password: str) -> bool:
    """True if the UTF-8 encoded password is longer than bcrypt accepts"""
    return len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plain password using bcrypt
    
    A fresh salt is generated on every call, so hashing the same password
    twice yields two different hashes that both verify.
    
    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt cost factor, defaults to the BCRYPT_ROUNDS setting
        
    Returns:
        Hashed password string
        
    Raises:
        ValueError: If the password is longer than MAX_PASSWORD_BYTES
    """
    if password_exceeds_limit(plain_password):
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    if rounds is None:
        rounds = get_settings().bcrypt_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password
    
    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against
        
    Returns:
        True if passwords match, False otherwise (including malformed hashes
        and passwords too long to have been hashed)
    """
    if not hashed_password or password_exceeds_limit(plain_password):
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError):
        return False
