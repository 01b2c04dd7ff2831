"""Profile use cases."""

from .change_name import ChangeNameRequest, ChangeNameUseCase

__all__ = ["ChangeNameRequest", "ChangeNameUseCase"]
