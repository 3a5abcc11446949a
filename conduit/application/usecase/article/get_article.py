"""Get article use case."""

from conduit.application.query import ArticleQueries

from ..base import BaseUseCase
from .common import ArticleResponse, ArticleSlugRequest


class GetArticleUseCase(BaseUseCase):
    """Use case for reading one article."""

    def __init__(self, article_queries: ArticleQueries) -> None:
        self.article_queries = article_queries

    async def execute(self, request: ArticleSlugRequest) -> ArticleResponse:
        view = await self.article_queries.get_article_by_slug(
            request.slug, request.security.current_user_id
        )
        return ArticleResponse(article=view)
