"""
Explicit operation results for the auth use cases.

Every use case returns an ``OperationResult`` instead of raising; the
``error`` tag tells the controller which response to build.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .user_dto import UserResponse


class AuthErrorKind(str, Enum):
    """Failure categories reported by auth operations"""
    VALIDATION = "validation"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class OperationResult:
    message: str
    data: Optional[UserResponse] = None
    error: Optional[AuthErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, message: str, data: Optional[UserResponse] = None) -> "OperationResult":
        return cls(message=message, data=data)

    @classmethod
    def failure(cls, error: AuthErrorKind, message: str) -> "OperationResult":
        return cls(message=message, error=error)
