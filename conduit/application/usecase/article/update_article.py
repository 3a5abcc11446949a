"""Update and delete article use cases."""

from pydantic import BaseModel

from conduit.application.query import ArticleQueries
from conduit.application.security import SecurityContext
from conduit.domain.model import ArticleChanges
from conduit.domain.service import ArticleService

from ..base import BaseUseCase, parse_slug
from .common import ArticleResponse, ArticleSlugRequest


class UpdateArticleRequest(BaseModel):
    """Update article request.

    Only the fields set on ``changes`` are applied.
    """

    security: SecurityContext
    slug: str
    changes: ArticleChanges


class UpdateArticleUseCase(BaseUseCase):
    """Use case for editing an article (author only)."""

    def __init__(
        self, article_service: ArticleService, article_queries: ArticleQueries
    ) -> None:
        self.article_service = article_service
        self.article_queries = article_queries

    async def execute(self, request: UpdateArticleRequest) -> ArticleResponse:
        """Execute update flow.

        A changed title moves the article to a new slug; the response carries it.

        Raises:
            UnauthorizedError: If anonymous
            NotFoundError: If no article has this slug
            ForbiddenError: If the caller is not the author
        """
        user_id = request.security.require_user_id()
        article = await self.article_service.update_article(
            user_id, parse_slug(request.slug), request.changes
        )
        view = await self.article_queries.get_article_by_slug(
            article.slug.root, user_id
        )
        return ArticleResponse(article=view)


class DeleteArticleUseCase(BaseUseCase):
    """Use case for deleting an article (author only)."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: ArticleSlugRequest) -> None:
        """Execute delete flow.

        Raises:
            UnauthorizedError: If anonymous
            NotFoundError: If no article has this slug
            ForbiddenError: If the caller is not the author
        """
        user_id = request.security.require_user_id()
        await self.article_service.delete_article(user_id, parse_slug(request.slug))
