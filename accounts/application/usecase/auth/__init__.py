"""Authentication use cases."""

from .current_user import GetCurrentUserUseCase
from .login import LoginRequest, LoginResponse, LoginUseCase

__all__ = [
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
]
