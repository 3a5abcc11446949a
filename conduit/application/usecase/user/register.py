"""Register user use case."""

from pydantic import BaseModel

from conduit.domain.service import JWTService, UserService

from ..base import BaseUseCase
from .common import AuthenticatedUser, UserResponse


class RegisterUserRequest(BaseModel):
    """Register user request."""

    email: str
    username: str
    password: str


class RegisterUserUseCase(BaseUseCase):
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User service
            jwt_service: JWT service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterUserRequest) -> UserResponse:
        """Execute registration.

        Raises:
            ValidationError: If any field is malformed or already taken
        """
        user = await self.user_service.register(
            request.email, request.username, request.password
        )
        token = self.jwt_service.create_token(user)
        return UserResponse(user=AuthenticatedUser.from_user(user, token))
