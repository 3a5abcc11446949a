"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase, CommentResponse
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .list_comments import CommentsResponse, ListCommentsRequest, ListCommentsUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentResponse",
    "CommentsResponse",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
]
