"""Delete comment use case."""

from pydantic import BaseModel

from conduit.application.security import SecurityContext
from conduit.domain.service import CommentService

from ..base import BaseUseCase, parse_comment_id, parse_slug


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    security: SecurityContext
    slug: str
    comment_id: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            UnauthorizedError: If anonymous
            NotFoundError: If the article or comment is unknown, or the comment
                belongs to another article
            ForbiddenError: If the caller did not write the comment
        """
        user_id = request.security.require_user_id()
        await self.comment_service.delete_comment(
            user_id,
            parse_slug(request.slug),
            parse_comment_id(request.comment_id),
        )
