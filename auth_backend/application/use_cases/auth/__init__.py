from .signup_user import SignupUserUseCase
from .login_user import LoginUserUseCase

__all__ = [
    "SignupUserUseCase",
    "LoginUserUseCase",
]
