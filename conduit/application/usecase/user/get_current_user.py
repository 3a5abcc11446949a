"""Get current user use case."""

from pydantic import BaseModel

from conduit.application.security import SecurityContext
from conduit.domain.service import JWTService, UserService

from ..base import BaseUseCase
from .common import AuthenticatedUser, UserResponse


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    security: SecurityContext


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for loading the authenticated caller's account."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Execute get current user flow.

        Raises:
            UnauthorizedError: If anonymous, or the token's user no longer exists
        """
        user_id = request.security.require_user_id()
        user = await self.user_service.get_current_user(user_id)
        token = self.jwt_service.create_token(user)
        return UserResponse(user=AuthenticatedUser.from_user(user, token))
