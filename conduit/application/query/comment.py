"""Comment query port."""

from abc import ABC, abstractmethod
from typing import List, Optional

from conduit.application.query.views import CommentView
from conduit.domain.value import CommentId, UserId


class CommentQueries(ABC):
    """Read-side access to comments."""

    @abstractmethod
    async def get_comments_by_slug(
        self, slug: str, viewer_id: Optional[UserId] = None
    ) -> List[CommentView]:
        """List an article's comments, oldest first.

        Args:
            slug: Article slug
            viewer_id: Viewing user; ``following`` is False when None

        Returns:
            Comment projections (empty if the article has none or is unknown)
        """
        pass

    @abstractmethod
    async def get_comment_by_id(
        self, comment_id: CommentId, viewer_id: Optional[UserId] = None
    ) -> CommentView:
        """Get one comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass
