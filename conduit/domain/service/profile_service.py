"""Profile (follow relation) domain service."""

import logfire
from pydantic import ValidationError as PydanticValidationError

from conduit.domain.error import BadRequestError, NotFoundError
from conduit.domain.model import User
from conduit.domain.repository import FollowRepository, UserRepository
from conduit.domain.value import UserId, Username

from .base import Service


class ProfileService(Service):
    """Domain service for following and unfollowing users."""

    def __init__(
        self,
        user_repository: UserRepository,
        follow_repository: FollowRepository,
    ) -> None:
        """Initialize profile service.

        Args:
            user_repository: User repository
            follow_repository: Follow relation repository
        """
        self.user_repository = user_repository
        self.follow_repository = follow_repository

    async def follow_user(self, follower_id: UserId, username: str) -> User:
        """Follow a user; following twice has no further effect.

        Args:
            follower_id: Caller's user ID
            username: Username of the user to follow

        Returns:
            The followed user

        Raises:
            NotFoundError: If no user has this username
            BadRequestError: If the caller tries to follow themselves
        """
        with logfire.span(
            "profile_service.follow_user",
            follower_id=str(follower_id),
            username=username,
        ):
            followee = await self._get_user(username)
            if followee.id == follower_id:
                logfire.warn("Self-follow attempt", user_id=str(follower_id))
                raise BadRequestError("Cannot follow yourself")

            await self.follow_repository.follow(follower_id, followee.id)
            logfire.info(
                "User followed",
                follower_id=str(follower_id),
                followee_id=str(followee.id),
            )
            return followee

    async def unfollow_user(self, follower_id: UserId, username: str) -> User:
        """Unfollow a user; a no-op if not currently following.

        Args:
            follower_id: Caller's user ID
            username: Username of the user to unfollow

        Returns:
            The unfollowed user

        Raises:
            NotFoundError: If no user has this username
        """
        with logfire.span(
            "profile_service.unfollow_user",
            follower_id=str(follower_id),
            username=username,
        ):
            followee = await self._get_user(username)
            await self.follow_repository.unfollow(follower_id, followee.id)
            logfire.info(
                "User unfollowed",
                follower_id=str(follower_id),
                followee_id=str(followee.id),
            )
            return followee

    async def _get_user(self, username: str) -> User:
        try:
            valid_username = Username(username)
        except PydanticValidationError:
            # A malformed username can't belong to anyone
            raise NotFoundError("User", username)

        user = await self.user_repository.find_by_username(valid_username)
        if not user:
            logfire.warn("User not found", username=username)
            raise NotFoundError("User", username)
        return user
