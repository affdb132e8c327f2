"""Persistence component: PostgreSQL in production."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from authn.config import Settings
from authn.domain.repository import PlatformRepository, UserRepository
from authn.persistence.database import create_engine, create_session_factory
from authn.persistence.repository import (
    PostgresPlatformRepository,
    PostgresUserRepository,
)
from authn.util.di.base import ProviderBase
from authn.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by PostgreSQL, one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Session committed when the request scope closes cleanly.

        A sign-up writes a user and a platform; both land or neither does.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_platform_repository(self, session: AsyncSession) -> PlatformRepository:
        return PostgresPlatformRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)
