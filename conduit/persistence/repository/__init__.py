"""SQL repository implementations."""

from conduit.persistence.repository.article import SqlArticleRepository
from conduit.persistence.repository.comment import SqlCommentRepository
from conduit.persistence.repository.follow import SqlFollowRepository
from conduit.persistence.repository.user import SqlUserRepository

__all__ = [
    "SqlUserRepository",
    "SqlArticleRepository",
    "SqlCommentRepository",
    "SqlFollowRepository",
]
