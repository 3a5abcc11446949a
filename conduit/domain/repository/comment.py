"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from conduit.domain.model.comment import Comment
from conduit.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment aggregate.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Persist a new comment.

        Args:
            comment: Comment without an identity

        Returns:
            The stored comment, carrying its new ID
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete_by_id(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Args:
            comment_id: The comment ID to delete
        """
        pass
