# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Application
        self.app_name: Final[str] = os.getenv("APP_NAME", "Auth Backend API")
        self.app_version: Final[str] = os.getenv("APP_VERSION", "1.0.0")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "auth_backend")
        self.mongo_users_collection: Final[str] = os.getenv("MONGO_USERS_COLLECTION", "users")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "10000")
        )
        
        # Password hashing
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))
        
        # CORS
        self.allowed_origins: Final[List[str]] = _split_csv(
            os.getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173")
        )


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
