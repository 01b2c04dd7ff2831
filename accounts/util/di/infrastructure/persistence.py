"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from accounts.application.query import UserFetcher
from accounts.config import Settings
from accounts.domain.repository import (
    Flusher,
    GroupRepository,
    MemberRepository,
    UserRepository,
)
from accounts.persistence.database import create_engine, create_session_factory
from accounts.persistence.query import PostgresUserFetcher
from accounts.persistence.repository import (
    PostgresGroupRepository,
    PostgresMemberRepository,
    PostgresUserRepository,
    SessionFlusher,
)
from accounts.util.di.base import ProviderBase
from accounts.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Work is committed by the use case's flusher; anything left open when
        the request fails is rolled back.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_group_repository(self, session: AsyncSession) -> GroupRepository:
        return PostgresGroupRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_member_repository(self, session: AsyncSession) -> MemberRepository:
        return PostgresMemberRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_flusher(self, session: AsyncSession) -> Flusher:
        return SessionFlusher(session)

    @provide(scope=Scope.REQUEST)
    def get_user_fetcher(self, session: AsyncSession) -> UserFetcher:
        return PostgresUserFetcher(session)
