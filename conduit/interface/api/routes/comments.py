"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from conduit.application.security import SecurityContext
from conduit.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentResponse,
    CommentsResponse,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)

router = APIRouter(
    prefix="/articles/{slug}/comments", tags=["comments"], route_class=DishkaRoute
)


class NewComment(BaseModel):
    """Comment fields accepted on creation."""

    body: str


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment."""

    comment: NewComment


@router.get("", response_model=CommentsResponse)
async def list_comments(
    slug: str,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[ListCommentsUseCase],
) -> CommentsResponse:
    """List an article's comments, oldest first."""
    return await use_case.execute(ListCommentsRequest(security=security, slug=slug))


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(
    slug: str,
    request: AddCommentAPIRequest,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[AddCommentUseCase],
) -> CommentResponse:
    """Comment on an article. Requires authentication."""
    return await use_case.execute(
        AddCommentRequest(security=security, slug=slug, body=request.comment.body)
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    slug: str,
    comment_id: str,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[DeleteCommentUseCase],
) -> None:
    """Delete one's own comment."""
    await use_case.execute(
        DeleteCommentRequest(security=security, slug=slug, comment_id=comment_id)
    )
