"""List articles and feed use cases."""

from typing import Optional

from pydantic import BaseModel, Field

from conduit.application.query import MAX_PAGE_VALUE, ArticleFilter, ArticleQueries
from conduit.application.security import SecurityContext
from conduit.config import PaginationSettings

from ..base import BaseUseCase
from .common import ArticlesResponse


class ListArticlesRequest(BaseModel):
    """List articles request.

    ``limit`` defaults to the configured page size and is capped at the
    configured maximum.
    """

    security: SecurityContext
    tag: Optional[str] = None
    author: Optional[str] = None
    favorited: Optional[str] = None  # Username of a user who favorited
    limit: Optional[int] = Field(default=None, ge=1, le=MAX_PAGE_VALUE)
    offset: int = Field(default=0, ge=0, le=MAX_PAGE_VALUE)


class FeedArticlesRequest(BaseModel):
    """Feed request."""

    security: SecurityContext
    limit: Optional[int] = Field(default=None, ge=1, le=MAX_PAGE_VALUE)
    offset: int = Field(default=0, ge=0, le=MAX_PAGE_VALUE)


def _page_size(limit: Optional[int], pagination: PaginationSettings) -> int:
    if limit is None:
        return pagination.default_limit
    return min(limit, pagination.max_limit)


class ListArticlesUseCase(BaseUseCase):
    """Use case for browsing articles, newest first."""

    def __init__(
        self, article_queries: ArticleQueries, pagination: PaginationSettings
    ) -> None:
        """Initialize list articles use case.

        Args:
            article_queries: Article queries
            pagination: Page size settings
        """
        self.article_queries = article_queries
        self.pagination = pagination

    async def execute(self, request: ListArticlesRequest) -> ArticlesResponse:
        """Execute list articles flow.

        Filters compose with AND. Authentication is optional.
        """
        filters = ArticleFilter(
            tag=request.tag,
            author=request.author,
            favorited_by=request.favorited,
            limit=_page_size(request.limit, self.pagination),
            offset=request.offset,
        )
        articles = await self.article_queries.get_articles(
            filters, request.security.current_user_id
        )
        return ArticlesResponse(articles=articles, articles_count=len(articles))


class FeedArticlesUseCase(BaseUseCase):
    """Use case for the caller's personalized feed."""

    def __init__(
        self, article_queries: ArticleQueries, pagination: PaginationSettings
    ) -> None:
        self.article_queries = article_queries
        self.pagination = pagination

    async def execute(self, request: FeedArticlesRequest) -> ArticlesResponse:
        """Execute feed flow: articles by followed authors, newest first.

        Raises:
            UnauthorizedError: If anonymous
        """
        user_id = request.security.require_user_id()
        articles = await self.article_queries.get_articles_feed(
            user_id,
            limit=_page_size(request.limit, self.pagination),
            offset=request.offset,
        )
        return ArticlesResponse(articles=articles, articles_count=len(articles))
