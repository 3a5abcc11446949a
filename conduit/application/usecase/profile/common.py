"""Shared profile use case models."""

from pydantic import BaseModel

from conduit.application.query import ProfileView
from conduit.application.query.views import View
from conduit.application.security import SecurityContext


class ProfileRequest(BaseModel):
    """Request addressing a user by username."""

    security: SecurityContext
    username: str


class ProfileResponse(View):
    """Response wrapping a profile."""

    profile: ProfileView
