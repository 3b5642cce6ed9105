# Standard library imports
import logging
from typing import Awaitable, Callable

# External package imports
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.auth_dto import SignupRequest, LoginRequest
from ...application.dto.response_dto import ApiResponse
from ...application.dto.result_dto import AuthErrorKind, OperationResult
from ...application.use_cases.auth.signup_user import SignupUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.container import get_container

logger = logging.getLogger(__name__)


router = APIRouter(tags=["authentication"])


ERROR_STATUS_CODES = {
    AuthErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    AuthErrorKind.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    AuthErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    AuthErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def envelope(status_code: int, message: str, data=None) -> JSONResponse:
    """Render the {message, data} envelope"""
    body = ApiResponse(message=message, data=data)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def _run(
    operation: Callable[[], Awaitable[OperationResult]],
    success_status: int,
) -> JSONResponse:
    try:
        result = await operation()
    except Exception as exception:
        logger.error(f"Unhandled error in auth endpoint: {exception}", exc_info=True)
        return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, f"An error occurred: {exception}")
    
    if result.ok:
        return envelope(success_status, result.message, result.data)
    return envelope(ERROR_STATUS_CODES[result.error], result.message)


@router.post("/login", response_model=ApiResponse)
async def login(request: LoginRequest) -> JSONResponse:
    """
    Verify email and password
    
    Args:
        request: User login request
        
    Returns:
        200 with the user record, 400 on a missing field, 401 on bad
        credentials, 500 on unexpected errors
    """
    async def operation() -> OperationResult:
        login_use_case = get_container().get(LoginUserUseCase)
        return await login_use_case.execute(request)
    
    return await _run(operation, status.HTTP_200_OK)


@router.post("/signup", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: SignupRequest) -> JSONResponse:
    """
    Register a new user
    
    Args:
        request: User signup request
        
    Returns:
        201 with null data, 400 on a missing field, 409 when the email is
        taken, 500 on unexpected errors
    """
    async def operation() -> OperationResult:
        signup_use_case = get_container().get(SignupUserUseCase)
        return await signup_use_case.execute(request)
    
    return await _run(operation, status.HTTP_201_CREATED)
