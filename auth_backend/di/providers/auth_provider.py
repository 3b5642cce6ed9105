from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.services.credential_service import CredentialService
from ...application.use_cases.auth.signup_user import SignupUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication provider - registers the credential service and auth use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the credential service as a singleton.
        Use cases are created on-demand via factories.
        """
        container.register_singleton(
            CredentialService,
            CredentialService(user_repository=container.get(UserRepository))
        )
        
        container.register_factory(
            SignupUserUseCase,
            lambda: SignupUserUseCase(
                credential_service=container.get(CredentialService)
            )
        )
        
        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                credential_service=container.get(CredentialService)
            )
        )
