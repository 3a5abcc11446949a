"""Profile use cases."""

from .common import ProfileRequest, ProfileResponse
from .follow_user import FollowUserUseCase, UnfollowUserUseCase
from .get_profile import GetProfileUseCase

__all__ = [
    "FollowUserUseCase",
    "GetProfileUseCase",
    "ProfileRequest",
    "ProfileResponse",
    "UnfollowUserUseCase",
]
