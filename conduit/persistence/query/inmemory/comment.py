"""In-memory comment queries for testing."""

from typing import List, Optional

from conduit.application.query import CommentQueries, CommentView
from conduit.domain.error import NotFoundError
from conduit.domain.model import Comment
from conduit.domain.value import CommentId, UserId
from conduit.persistence.repository.inmemory import InMemoryStore

from .common import profile_view


class InMemoryCommentQueries(CommentQueries):
    """Comment projections computed from an InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _view(self, comment: Comment, viewer_id: Optional[UserId]) -> CommentView:
        author = self._store.users[comment.author_id]
        return CommentView(
            id=str(comment.id),
            body=comment.body,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=profile_view(self._store, author, viewer_id),
        )

    async def get_comments_by_slug(
        self, slug: str, viewer_id: Optional[UserId] = None
    ) -> List[CommentView]:
        article_ids = {
            a.id for a in self._store.articles.values() if str(a.slug) == slug
        }
        comments = sorted(
            (c for c in self._store.comments.values() if c.article_id in article_ids),
            key=lambda c: c.created_at,
        )
        return [self._view(c, viewer_id) for c in comments]

    async def get_comment_by_id(
        self, comment_id: CommentId, viewer_id: Optional[UserId] = None
    ) -> CommentView:
        comment = self._store.comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return self._view(comment, viewer_id)
