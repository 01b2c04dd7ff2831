"""Work members group use cases."""

from .remove import RemoveGroupRequest, RemoveGroupUseCase

__all__ = ["RemoveGroupRequest", "RemoveGroupUseCase"]
