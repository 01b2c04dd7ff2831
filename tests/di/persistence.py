"""Mock persistence providers for testing."""

from dishka import Scope, provide

from accounts.application.query import UserFetcher
from accounts.domain.repository import (
    Flusher,
    GroupRepository,
    MemberRepository,
    UserRepository,
)
from accounts.persistence.query import InMemoryUserFetcher
from accounts.persistence.repository.inmemory import (
    InMemoryFlusher,
    InMemoryGroupRepository,
    InMemoryMemberRepository,
    InMemoryUserRepository,
)
from accounts.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests of one container, which
    multi-request HTTP flows rely on. Every test builds its own container,
    so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_group_repository(self) -> GroupRepository:
        return InMemoryGroupRepository()

    @provide(scope=Scope.APP)
    def get_member_repository(self) -> MemberRepository:
        return InMemoryMemberRepository()

    @provide(scope=Scope.APP)
    def get_flusher(self) -> Flusher:
        return InMemoryFlusher()

    @provide(scope=Scope.APP)
    def get_user_fetcher(self, user_repository: UserRepository) -> UserFetcher:
        """Provide a read model over the same in-memory users."""
        return InMemoryUserFetcher(user_repository)
