"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository
from .follow import InMemoryFollowRepository
from .store import InMemoryStore
from .transaction import InMemoryTransaction
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryFollowRepository",
    "InMemoryStore",
    "InMemoryTransaction",
    "InMemoryUserRepository",
]
