"""PostgreSQL repository implementations."""

from .flusher import SessionFlusher
from .group import PostgresGroupRepository, PostgresMemberRepository
from .user import PostgresUserRepository

__all__ = [
    "PostgresGroupRepository",
    "PostgresMemberRepository",
    "PostgresUserRepository",
    "SessionFlusher",
]
