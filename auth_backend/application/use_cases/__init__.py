from .auth import (
    SignupUserUseCase,
    LoginUserUseCase,
)

__all__ = [
    "SignupUserUseCase",
    "LoginUserUseCase",
]
