"""Async PostgreSQL engine and sessions."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the engine for ``database.url`` (a ``postgresql+asyncpg`` URL).

    Args:
        database: Connection string and pool sizing
        echo: Log every SQL statement

    Returns:
        Async engine; connections are checked before reuse
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Rows are mapped to domain models right after each statement, so
    # attributes never need reloading after commit
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
