"""Shared article use case models."""

from pydantic import BaseModel

from conduit.application.query import ArticleView
from conduit.application.query.views import View
from conduit.application.security import SecurityContext


class ArticleSlugRequest(BaseModel):
    """Request addressing one article by slug."""

    security: SecurityContext
    slug: str


class ArticleResponse(View):
    """Response wrapping one article."""

    article: ArticleView


class ArticlesResponse(View):
    """One page of articles.

    ``articles_count`` is the size of this page, not a total.
    """

    articles: list[ArticleView]
    articles_count: int
