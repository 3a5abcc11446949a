"""Mock persistence providers for testing."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from conduit.application.query import ArticleQueries, CommentQueries, ProfileQueries
from conduit.application.transaction import Transaction
from conduit.domain.repository import (
    ArticleRepository,
    CommentRepository,
    FollowRepository,
    UserRepository,
)
from conduit.persistence.query.inmemory import (
    InMemoryArticleQueries,
    InMemoryCommentQueries,
    InMemoryProfileQueries,
)
from conduit.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
    InMemoryFollowRepository,
    InMemoryStore,
    InMemoryTransaction,
    InMemoryUserRepository,
)
from conduit.util.di.infrastructure.persistence import PersistenceProvider


def new_store() -> InMemoryStore:
    return InMemoryStore()


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope by default to ensure test isolation - each test gets a
    fresh store. Repositories and queries within a request share that store,
    so queries see what the services wrote. A failed request restores the
    store to its state when the request began.

    Args:
        store_scope: Lifetime of the store; APP keeps data across requests
            (for tests that drive the HTTP API)
    """

    __is_mock__ = True

    scope = Scope.REQUEST

    def __init__(self, store_scope: Scope = Scope.REQUEST) -> None:
        super().__init__()
        self.provide(new_store, scope=store_scope)

    @provide
    async def get_inmemory_transaction(
        self, store: InMemoryStore
    ) -> AsyncIterator[InMemoryTransaction]:
        transaction = InMemoryTransaction(store)
        exc = yield transaction
        await transaction.complete(failed=exc is not None)

    @provide
    def get_transaction(self, transaction: InMemoryTransaction) -> Transaction:
        return transaction

    @provide
    def get_user_repository(self, transaction: InMemoryTransaction) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(transaction.store)

    @provide
    def get_article_repository(
        self, transaction: InMemoryTransaction
    ) -> ArticleRepository:
        """Provide in-memory article repository."""
        return InMemoryArticleRepository(transaction.store)

    @provide
    def get_comment_repository(
        self, transaction: InMemoryTransaction
    ) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(transaction.store)

    @provide
    def get_follow_repository(
        self, transaction: InMemoryTransaction
    ) -> FollowRepository:
        """Provide in-memory follow repository."""
        return InMemoryFollowRepository(transaction.store)

    @provide
    def get_article_queries(self, store: InMemoryStore) -> ArticleQueries:
        return InMemoryArticleQueries(store)

    @provide
    def get_comment_queries(self, store: InMemoryStore) -> CommentQueries:
        return InMemoryCommentQueries(store)

    @provide
    def get_profile_queries(self, store: InMemoryStore) -> ProfileQueries:
        return InMemoryProfileQueries(store)
