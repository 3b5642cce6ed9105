# Standard library imports
import logging

# Local application imports
from ...services.credential_service import CredentialService
from ...dto.auth_dto import LoginRequest
from ...dto.user_dto import UserResponse
from ...dto.result_dto import AuthErrorKind, OperationResult

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for verifying a user's credentials"""
    
    SUCCESS_MESSAGE = "Login successful"
    INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
    
    def __init__(self, credential_service: CredentialService) -> None:
        self.credential_service = credential_service
    
    async def execute(self, request: LoginRequest) -> OperationResult:
        """
        Authenticate a user
        
        Args:
            request: Login request with email and password
            
        Returns:
            OperationResult carrying the user (without password) on success,
            or tagged with VALIDATION, INVALID_CREDENTIALS or UNEXPECTED
        """
        missing = request.missing_fields()
        if missing:
            return OperationResult.failure(AuthErrorKind.VALIDATION, f"{missing[0]} is required")
        
        try:
            user = await self.credential_service.authenticate(request.email, request.password)
        except Exception as exception:
            logger.error(f"Login failed for {request.email}: {exception}", exc_info=True)
            return OperationResult.failure(
                AuthErrorKind.UNEXPECTED, f"An error occurred: {exception}"
            )
        
        if user is None:
            logger.info(f"Invalid credentials for {request.email}")
            return OperationResult.failure(
                AuthErrorKind.INVALID_CREDENTIALS, self.INVALID_CREDENTIALS_MESSAGE
            )
        
        return OperationResult.success(self.SUCCESS_MESSAGE, UserResponse.from_user(user))
