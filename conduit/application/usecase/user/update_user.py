"""Update user use case."""

from pydantic import BaseModel

from conduit.application.security import SecurityContext
from conduit.domain.model import UserChanges
from conduit.domain.service import JWTService, UserService

from ..base import BaseUseCase
from .common import AuthenticatedUser, UserResponse


class UpdateUserRequest(BaseModel):
    """Update user request.

    Only the fields set on ``changes`` are applied.
    """

    security: SecurityContext
    changes: UserChanges


class UpdateUserUseCase(BaseUseCase):
    """Use case for editing the caller's own account."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: UpdateUserRequest) -> UserResponse:
        """Execute update user flow.

        Raises:
            UnauthorizedError: If anonymous
            ValidationError: If a new email/username is malformed or taken
        """
        user_id = request.security.require_user_id()
        user = await self.user_service.update_user(user_id, request.changes)
        # Email and username live in the token, so mint a new one
        token = self.jwt_service.create_token(user)
        return UserResponse(user=AuthenticatedUser.from_user(user, token))
