"""In-memory comment repository for testing."""

from typing import Optional
from uuid import uuid4

from conduit.domain.model.comment import Comment
from conduit.domain.repository.comment import CommentRepository
from conduit.domain.value import CommentId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    async def create(self, comment: Comment) -> Comment:
        stored = comment.with_id(CommentId(uuid4()))
        self._store.comments[stored.id] = stored
        return stored

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._store.comments.get(comment_id)

    async def delete_by_id(self, comment_id: CommentId) -> None:
        self._store.comments.pop(comment_id, None)
