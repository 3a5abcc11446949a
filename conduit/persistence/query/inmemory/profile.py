"""In-memory profile queries for testing."""

from typing import Optional

from conduit.application.query import ProfileQueries, ProfileView
from conduit.domain.error import NotFoundError
from conduit.domain.value import UserId
from conduit.persistence.repository.inmemory import InMemoryStore

from .common import profile_view


class InMemoryProfileQueries(ProfileQueries):
    """Profile projections computed from an InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def get_profile_by_username(
        self, username: str, viewer_id: Optional[UserId] = None
    ) -> ProfileView:
        for user in self._store.users.values():
            if user.username.root == username:
                return profile_view(self._store, user, viewer_id)
        raise NotFoundError("Profile", username)
