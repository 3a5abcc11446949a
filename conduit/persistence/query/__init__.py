"""SQL implementations of the query ports."""

from conduit.persistence.query.article import SqlArticleQueries
from conduit.persistence.query.comment import SqlCommentQueries
from conduit.persistence.query.profile import SqlProfileQueries

__all__ = ["SqlArticleQueries", "SqlCommentQueries", "SqlProfileQueries"]
