"""Follow relation repository interface."""

from abc import ABC, abstractmethod

from conduit.domain.value import UserId


class FollowRepository(ABC):
    """Repository for follower -> followee edges.

    Edges are idempotent: following twice stores one edge, unfollowing an
    absent edge does nothing.
    """

    @abstractmethod
    async def follow(self, follower_id: UserId, followee_id: UserId) -> None:
        """Create the edge if it does not exist.

        Args:
            follower_id: User who follows
            followee_id: User being followed
        """
        pass

    @abstractmethod
    async def unfollow(self, follower_id: UserId, followee_id: UserId) -> None:
        """Remove the edge if it exists.

        Args:
            follower_id: User who follows
            followee_id: User being followed
        """
        pass

    @abstractmethod
    async def is_following(self, follower_id: UserId, followee_id: UserId) -> bool:
        """Check whether the edge exists."""
        pass
