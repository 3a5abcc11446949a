"""Profile query port."""

from abc import ABC, abstractmethod
from typing import Optional

from conduit.application.query.views import ProfileView
from conduit.domain.value import UserId


class ProfileQueries(ABC):
    """Read-side access to public profiles."""

    @abstractmethod
    async def get_profile_by_username(
        self, username: str, viewer_id: Optional[UserId] = None
    ) -> ProfileView:
        """Get a profile with the viewer-relative ``following`` flag.

        Raises:
            NotFoundError: If no user has this username
        """
        pass
