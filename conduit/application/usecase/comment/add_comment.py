"""Add comment use case."""

from pydantic import BaseModel

from conduit.application.query import CommentQueries, CommentView
from conduit.application.query.views import View
from conduit.application.security import SecurityContext
from conduit.domain.service import CommentService

from ..base import BaseUseCase, parse_slug


class AddCommentRequest(BaseModel):
    """Add comment request."""

    security: SecurityContext
    slug: str
    body: str


class CommentResponse(View):
    """Response wrapping one comment."""

    comment: CommentView


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on an article."""

    def __init__(
        self, comment_service: CommentService, comment_queries: CommentQueries
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment service (writes)
            comment_queries: Comment queries (response projection)
        """
        self.comment_service = comment_service
        self.comment_queries = comment_queries

    async def execute(self, request: AddCommentRequest) -> CommentResponse:
        """Execute add comment flow.

        Raises:
            UnauthorizedError: If anonymous
            NotFoundError: If no article has this slug
            ValidationError: If the body is blank
        """
        user_id = request.security.require_user_id()
        comment = await self.comment_service.add_comment(
            user_id, parse_slug(request.slug), request.body
        )
        view = await self.comment_queries.get_comment_by_id(comment.id, user_id)
        return CommentResponse(comment=view)
