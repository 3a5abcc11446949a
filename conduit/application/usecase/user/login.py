"""Login use case."""

from pydantic import BaseModel

from conduit.domain.service import JWTService, UserService

from ..base import BaseUseCase
from .common import AuthenticatedUser, UserResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for exchanging credentials for a token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> UserResponse:
        """Execute login flow.

        Args:
            request: Email and password

        Returns:
            The account with a new token

        Raises:
            UnauthorizedError: If the credentials do not match an account
        """
        user = await self.user_service.login(request.email, request.password)
        token = self.jwt_service.create_token(user)
        return UserResponse(user=AuthenticatedUser.from_user(user, token))
