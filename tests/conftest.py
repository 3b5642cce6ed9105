"""
Shared pytest fixtures for auth backend tests.
"""
import os
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest

from auth_backend.domain.exceptions import DuplicateEmailError
from auth_backend.domain.models.user import User
from auth_backend.domain.repositories.user_repository import UserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_auth_db",
        "BCRYPT_ROUNDS": "4",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.app_name = "Auth Backend API"
    mock.app_version = "1.0.0"
    mock.log_level = "INFO"
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_users_collection = "users"
    mock.mongo_server_selection_timeout_ms = 1000
    mock.bcrypt_rounds = 4
    mock.allowed_origins = ["http://localhost:5173"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("auth_backend.core.config.get_settings", return_value=mock), patch(
        "auth_backend.core.security.get_settings", return_value=mock
    ):
        yield mock


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a list, enforcing unique emails like the Mongo index"""

    def __init__(self) -> None:
        self.documents: List[User] = []
        self._next_id = 1

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.documents:
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        if any(existing.email == user.email and existing.id != user.id for existing in self.documents):
            raise DuplicateEmailError(user.email)
        if user.id is None:
            user = User(
                id=f"{self._next_id:024x}",
                name=user.name,
                email=user.email,
                hashed_password=user.hashed_password,
                image=user.image,
            )
            self._next_id += 1
            self.documents.append(user)
        else:
            self.documents = [user if existing.id == user.id else existing for existing in self.documents]
        return user

    async def ensure_indexes(self) -> None:
        return None


@pytest.fixture
def memory_user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def user_factory():
    """Build domain users with sensible defaults."""
    def _build(**overrides) -> User:
        fields: Dict = {
            "id": "64b7f0c2a1b2c3d4e5f60718",
            "name": "Test User",
            "email": "test@example.com",
            "hashed_password": "$2b$04$placeholderplaceholderplaceholderplaceholde",
            "image": None,
        }
        fields.update(overrides)
        return User(**fields)
    return _build
