"""Password reset use cases."""

from .request import ResetRequest, ResetRequestUseCase
from .reset import ResetPasswordRequest, ResetPasswordUseCase

__all__ = [
    "ResetPasswordRequest",
    "ResetPasswordUseCase",
    "ResetRequest",
    "ResetRequestUseCase",
]
