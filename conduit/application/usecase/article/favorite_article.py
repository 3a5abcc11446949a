"""Favorite and unfavorite use cases."""

from conduit.application.query import ArticleQueries
from conduit.domain.service import ArticleService

from ..base import BaseUseCase, parse_slug
from .common import ArticleResponse, ArticleSlugRequest


class FavoriteArticleUseCase(BaseUseCase):
    """Use case for favoriting an article (idempotent)."""

    def __init__(
        self, article_service: ArticleService, article_queries: ArticleQueries
    ) -> None:
        self.article_service = article_service
        self.article_queries = article_queries

    async def execute(self, request: ArticleSlugRequest) -> ArticleResponse:
        user_id = request.security.require_user_id()
        article = await self.article_service.favorite_article(
            user_id, parse_slug(request.slug)
        )
        view = await self.article_queries.get_article_by_slug(
            article.slug.root, user_id
        )
        return ArticleResponse(article=view)


class UnfavoriteArticleUseCase(BaseUseCase):
    """Use case for removing a favorite (no-op if absent)."""

    def __init__(
        self, article_service: ArticleService, article_queries: ArticleQueries
    ) -> None:
        self.article_service = article_service
        self.article_queries = article_queries

    async def execute(self, request: ArticleSlugRequest) -> ArticleResponse:
        user_id = request.security.require_user_id()
        article = await self.article_service.unfavorite_article(
            user_id, parse_slug(request.slug)
        )
        view = await self.article_queries.get_article_by_slug(
            article.slug.root, user_id
        )
        return ArticleResponse(article=view)
