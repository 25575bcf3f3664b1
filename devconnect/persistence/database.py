"""Async engine and sessions (PostgreSQL through asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from devconnect.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine for ``settings.database``; SQL is echoed in debug mode."""
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions that flush explicitly and keep objects usable after commit.

    The persistence provider opens one per request and commits or rolls it
    back when the request ends.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
