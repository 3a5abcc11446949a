"""Query ports (read side).

Implementations live in the persistence layer.
"""

from conduit.application.query.article import ArticleQueries
from conduit.application.query.comment import CommentQueries
from conduit.application.query.profile import ProfileQueries
from conduit.application.query.views import (
    MAX_PAGE_VALUE,
    ArticleFilter,
    ArticleView,
    CommentView,
    ProfileView,
)

__all__ = [
    "ArticleQueries",
    "CommentQueries",
    "ProfileQueries",
    "ArticleFilter",
    "ArticleView",
    "CommentView",
    "ProfileView",
    "MAX_PAGE_VALUE",
]
