from .config import Settings, get_settings
from .logging_config import setup_logging
from .security import (
    MAX_PASSWORD_BYTES,
    hash_password,
    password_exceeds_limit,
    verify_password,
)

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "MAX_PASSWORD_BYTES",
    "hash_password",
    "password_exceeds_limit",
    "verify_password",
]
