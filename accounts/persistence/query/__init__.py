"""Read model implementations."""

from .inmemory import InMemoryUserFetcher
from .user import PostgresUserFetcher

__all__ = ["InMemoryUserFetcher", "PostgresUserFetcher"]
