"""In-memory query implementations for testing."""

from .article import InMemoryArticleQueries
from .comment import InMemoryCommentQueries
from .profile import InMemoryProfileQueries

__all__ = [
    "InMemoryArticleQueries",
    "InMemoryCommentQueries",
    "InMemoryProfileQueries",
]
