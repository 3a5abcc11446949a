"""Domain model entities for Conduit."""

from conduit.domain.model.article import Article, ArticleChanges
from conduit.domain.model.comment import Comment
from conduit.domain.model.common import ChangeSet, FieldState
from conduit.domain.model.user import User, UserChanges

__all__ = [
    "User",
    "UserChanges",
    "Article",
    "ArticleChanges",
    "Comment",
    "ChangeSet",
    "FieldState",
]
