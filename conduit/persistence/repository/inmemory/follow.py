"""In-memory follow repository for testing."""

from conduit.domain.repository.follow import FollowRepository
from conduit.domain.value import UserId

from .store import InMemoryStore


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    async def follow(self, follower_id: UserId, followee_id: UserId) -> None:
        self._store.follows.add((follower_id, followee_id))

    async def unfollow(self, follower_id: UserId, followee_id: UserId) -> None:
        self._store.follows.discard((follower_id, followee_id))

    async def is_following(self, follower_id: UserId, followee_id: UserId) -> bool:
        return (follower_id, followee_id) in self._store.follows
