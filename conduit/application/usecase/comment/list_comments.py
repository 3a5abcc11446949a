"""List comments use case."""

from pydantic import BaseModel

from conduit.application.query import CommentQueries, CommentView
from conduit.application.query.views import View
from conduit.application.security import SecurityContext

from ..base import BaseUseCase


class ListCommentsRequest(BaseModel):
    """List comments request."""

    security: SecurityContext
    slug: str


class CommentsResponse(View):
    """An article's comments, oldest first."""

    comments: list[CommentView]


class ListCommentsUseCase(BaseUseCase):
    """Use case for reading an article's comment thread."""

    def __init__(self, comment_queries: CommentQueries) -> None:
        self.comment_queries = comment_queries

    async def execute(self, request: ListCommentsRequest) -> CommentsResponse:
        comments = await self.comment_queries.get_comments_by_slug(
            request.slug, request.security.current_user_id
        )
        return CommentsResponse(comments=comments)
