"""Repository interfaces for the accounts domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from accounts.domain.repository.flusher import Flusher
from accounts.domain.repository.group import GroupRepository, MemberRepository
from accounts.domain.repository.user import UserRepository

__all__ = [
    "Flusher",
    "GroupRepository",
    "MemberRepository",
    "UserRepository",
]
