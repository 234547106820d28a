"""Persistence component: PostgreSQL in production."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from blog.config import DatabaseSettings, Settings
from blog.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from blog.persistence.database import create_engine, create_session_factory
from blog.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresUserRepository,
)
from blog.util.di.base import ProviderBase
from blog.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    Implementations provide UserRepository, PostRepository and
    CommentRepository at REQUEST scope.
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories sharing one transaction per request."""

    @provide(scope=Scope.APP)
    async def get_engine(
        self, database: DatabaseSettings, settings: Settings
    ) -> AsyncIterator[AsyncEngine]:
        """Engine for the container's lifetime; disposed on close."""
        engine = create_engine(database, echo=settings.debug)
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
        """Session committed when the request scope closes.

        Domain errors are turned into responses by the API's exception
        handlers before the scope closes, so they still commit. Only an
        exception that escapes the scope rolls back. Use cases raise before
        writing.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                logfire.info("Request transaction rolled back")
                raise
            else:
                await session.commit()

    users = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    posts = provide(
        PostgresPostRepository, provides=PostRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
