"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from conduit.application.query import ArticleQueries, CommentQueries, ProfileQueries
from conduit.application.transaction import Transaction
from conduit.config import Settings
from conduit.domain.repository import (
    ArticleRepository,
    CommentRepository,
    FollowRepository,
    UserRepository,
)
from conduit.persistence.database import create_engine, create_session_factory
from conduit.persistence.query import (
    SqlArticleQueries,
    SqlCommentQueries,
    SqlProfileQueries,
)
from conduit.persistence.repository import (
    SqlArticleRepository,
    SqlCommentRepository,
    SqlFollowRepository,
    SqlUserRepository,
)
from conduit.persistence.transaction import SqlTransaction
from conduit.util.di.base import ProviderBase
from conduit.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide the database session of one request, closed at its end."""
        async with session_factory() as session:
            yield session

    @provide(scope=Scope.REQUEST)
    async def get_sql_transaction(
        self, session: AsyncSession
    ) -> AsyncIterator[SqlTransaction]:
        """Provide the request's unit of work over its session.

        dishka sends the exception that ended the request scope (or None)
        back into this generator: a failed request rolls back, a successful
        one commits unless an error handler already rolled it back.
        """
        transaction = SqlTransaction(session)
        exc = yield transaction
        if exc is not None:
            logfire.warn("Request failed, rolling back", error=str(exc))
        await transaction.complete(failed=exc is not None)

    @provide(scope=Scope.REQUEST)
    def get_transaction(self, transaction: SqlTransaction) -> Transaction:
        """Expose the unit of work to the interface layer."""
        return transaction

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, transaction: SqlTransaction) -> UserRepository:
        """Provide User repository."""
        return SqlUserRepository(transaction.session)

    @provide(scope=Scope.REQUEST)
    def get_article_repository(
        self, transaction: SqlTransaction
    ) -> ArticleRepository:
        """Provide Article repository."""
        return SqlArticleRepository(transaction.session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(
        self, transaction: SqlTransaction
    ) -> CommentRepository:
        """Provide Comment repository."""
        return SqlCommentRepository(transaction.session)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, transaction: SqlTransaction) -> FollowRepository:
        """Provide Follow repository."""
        return SqlFollowRepository(transaction.session)

    @provide(scope=Scope.REQUEST)
    def get_article_queries(self, session: AsyncSession) -> ArticleQueries:
        """Provide article queries."""
        return SqlArticleQueries(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_queries(self, session: AsyncSession) -> CommentQueries:
        """Provide comment queries."""
        return SqlCommentQueries(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_queries(self, session: AsyncSession) -> ProfileQueries:
        """Provide profile queries."""
        return SqlProfileQueries(session)
