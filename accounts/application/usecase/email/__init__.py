"""Email change use cases."""

from .confirm import ConfirmEmailChangeUseCase, EmailConfirmRequest
from .request import EmailChangeRequest, RequestEmailChangeUseCase

__all__ = [
    "ConfirmEmailChangeUseCase",
    "EmailChangeRequest",
    "EmailConfirmRequest",
    "RequestEmailChangeUseCase",
]
