from .auth_dto import SignupRequest, LoginRequest
from .user_dto import UserResponse
from .response_dto import ApiResponse
from .result_dto import AuthErrorKind, OperationResult

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "UserResponse",
    "ApiResponse",
    "AuthErrorKind",
    "OperationResult",
]
