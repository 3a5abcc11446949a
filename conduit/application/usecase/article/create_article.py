"""Create article use case."""

from pydantic import BaseModel

from conduit.application.query import ArticleQueries
from conduit.application.security import SecurityContext
from conduit.domain.service import ArticleService

from ..base import BaseUseCase
from .common import ArticleResponse


class CreateArticleRequest(BaseModel):
    """Create article request."""

    security: SecurityContext
    title: str
    description: str
    body: str
    tag_list: list[str] = []


class CreateArticleUseCase(BaseUseCase):
    """Use case for publishing an article."""

    def __init__(
        self, article_service: ArticleService, article_queries: ArticleQueries
    ) -> None:
        """Initialize create article use case.

        Args:
            article_service: Article service (writes)
            article_queries: Article queries (response projection)
        """
        self.article_service = article_service
        self.article_queries = article_queries

    async def execute(self, request: CreateArticleRequest) -> ArticleResponse:
        """Execute create article flow.

        Returns:
            The stored article as seen by its author

        Raises:
            UnauthorizedError: If anonymous
            ValidationError: If title, description or body is blank
        """
        user_id = request.security.require_user_id()
        article = await self.article_service.create_article(
            user_id,
            request.title,
            request.description,
            request.body,
            request.tag_list,
        )
        view = await self.article_queries.get_article_by_slug(
            article.slug.root, user_id
        )
        return ArticleResponse(article=view)
