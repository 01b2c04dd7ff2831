"""Sign up use cases."""

from .confirm import SignUpConfirmRequest, SignUpConfirmUseCase
from .request import SignUpRequest, SignUpRequestUseCase

__all__ = [
    "SignUpConfirmRequest",
    "SignUpConfirmUseCase",
    "SignUpRequest",
    "SignUpRequestUseCase",
]
