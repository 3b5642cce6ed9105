# Standard library imports
import logging

# Local application imports
from ....core.security import MAX_PASSWORD_BYTES, password_exceeds_limit
from ....domain.exceptions import DuplicateEmailError
from ...services.credential_service import CredentialService
from ...dto.auth_dto import SignupRequest
from ...dto.result_dto import AuthErrorKind, OperationResult

logger = logging.getLogger(__name__)


class SignupUserUseCase:
    """Use case for registering a new user"""
    
    SUCCESS_MESSAGE = "User registered successfully"
    DUPLICATE_EMAIL_MESSAGE = "Email already exists"
    PASSWORD_TOO_LONG_MESSAGE = f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
    
    def __init__(self, credential_service: CredentialService) -> None:
        self.credential_service = credential_service
    
    async def execute(self, request: SignupRequest) -> OperationResult:
        """
        Register a new user
        
        Args:
            request: Signup request with name, email, password and optional image
            
        Returns:
            OperationResult with no data on success, or tagged with
            VALIDATION, DUPLICATE_EMAIL or UNEXPECTED
        """
        missing = request.missing_fields()
        if missing:
            return OperationResult.failure(AuthErrorKind.VALIDATION, f"{missing[0]} is required")
        if password_exceeds_limit(request.password):
            return OperationResult.failure(AuthErrorKind.VALIDATION, self.PASSWORD_TOO_LONG_MESSAGE)

        try:
            if await self.credential_service.check_email_exists(request.email):
                logger.info(f"Signup rejected, email already registered: {request.email}")
                return OperationResult.failure(
                    AuthErrorKind.DUPLICATE_EMAIL, self.DUPLICATE_EMAIL_MESSAGE
                )
            
            await self.credential_service.register_user(
                name=request.name,
                email=request.email,
                password=request.password,
                image=request.image,
            )
        except DuplicateEmailError:
            # Lost the race against a concurrent signup for the same email
            logger.info(f"Signup rejected by unique index: {request.email}")
            return OperationResult.failure(
                AuthErrorKind.DUPLICATE_EMAIL, self.DUPLICATE_EMAIL_MESSAGE
            )
        except Exception as exception:
            logger.error(f"Signup failed for {request.email}: {exception}", exc_info=True)
            return OperationResult.failure(
                AuthErrorKind.UNEXPECTED, f"An error occurred: {exception}"
            )
        
        logger.info(f"Registered user {request.email}")
        return OperationResult.success(self.SUCCESS_MESSAGE)
