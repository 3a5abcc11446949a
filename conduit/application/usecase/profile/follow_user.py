"""Follow and unfollow use cases."""

from conduit.application.query import ProfileQueries
from conduit.domain.service import ProfileService

from ..base import BaseUseCase
from .common import ProfileRequest, ProfileResponse


class FollowUserUseCase(BaseUseCase):
    """Use case for following another user."""

    def __init__(
        self, profile_service: ProfileService, profile_queries: ProfileQueries
    ) -> None:
        """Initialize follow use case.

        Args:
            profile_service: Profile service (writes)
            profile_queries: Profile queries (response projection)
        """
        self.profile_service = profile_service
        self.profile_queries = profile_queries

    async def execute(self, request: ProfileRequest) -> ProfileResponse:
        """Execute follow flow.

        Raises:
            UnauthorizedError: If anonymous
            NotFoundError: If no user has this username
            BadRequestError: If the caller targets themselves
        """
        user_id = request.security.require_user_id()
        followee = await self.profile_service.follow_user(user_id, request.username)
        profile = await self.profile_queries.get_profile_by_username(
            followee.username.root, user_id
        )
        return ProfileResponse(profile=profile)


class UnfollowUserUseCase(BaseUseCase):
    """Use case for unfollowing a user."""

    def __init__(
        self, profile_service: ProfileService, profile_queries: ProfileQueries
    ) -> None:
        self.profile_service = profile_service
        self.profile_queries = profile_queries

    async def execute(self, request: ProfileRequest) -> ProfileResponse:
        """Execute unfollow flow (no-op if not following).

        Raises:
            UnauthorizedError: If anonymous
            NotFoundError: If no user has this username
        """
        user_id = request.security.require_user_id()
        followee = await self.profile_service.unfollow_user(user_id, request.username)
        profile = await self.profile_queries.get_profile_by_username(
            followee.username.root, user_id
        )
        return ProfileResponse(profile=profile)
