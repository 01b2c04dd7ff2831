"""In-memory repository implementations for testing."""

from .flusher import InMemoryFlusher
from .group import InMemoryGroupRepository, InMemoryMemberRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryFlusher",
    "InMemoryGroupRepository",
    "InMemoryMemberRepository",
    "InMemoryUserRepository",
]
