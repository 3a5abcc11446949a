"""Get profile use case."""

from conduit.application.query import ProfileQueries

from ..base import BaseUseCase
from .common import ProfileRequest, ProfileResponse


class GetProfileUseCase(BaseUseCase):
    """Use case for viewing a public profile."""

    def __init__(self, profile_queries: ProfileQueries) -> None:
        self.profile_queries = profile_queries

    async def execute(self, request: ProfileRequest) -> ProfileResponse:
        """Execute get profile flow.

        Authentication is optional; ``following`` is False for anonymous callers.

        Raises:
            NotFoundError: If no user has this username
        """
        profile = await self.profile_queries.get_profile_by_username(
            request.username, request.security.current_user_id
        )
        return ProfileResponse(profile=profile)
