"""Shared user use case models."""

from typing import Optional

from conduit.application.query.views import View
from conduit.domain.model import User


class AuthenticatedUser(View):
    """The caller's own account, with a fresh token."""

    email: str
    token: str
    username: str
    bio: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_user(cls, user: User, token: str) -> "AuthenticatedUser":
        return cls(
            email=user.email.root,
            token=token,
            username=user.username.root,
            bio=user.bio,
            image=user.image,
        )


class UserResponse(View):
    """Response wrapping the caller's account."""

    user: AuthenticatedUser
