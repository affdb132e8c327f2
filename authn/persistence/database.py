"""Async PostgreSQL engine and sessions."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from authn.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine, echoing SQL when debug is on."""
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories flush explicitly; the request scope commits
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
