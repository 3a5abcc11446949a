"""JWT token domain service."""

from uuid import UUID

import logfire

from conduit.config import AuthSettings
from conduit.domain.model import User
from conduit.domain.value import UserId
from conduit.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create JWT token for user.

        Args:
            user: Stored user (must have an ID)

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            token = create_token(
                str(user.id), user.email.root, user.username.root, self.auth_settings
            )
            logfire.info("JWT token created", user_id=str(user.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract user ID from JWT token without raising exceptions.

        Useful where authentication is optional: a missing or invalid token
        means an anonymous caller.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return UserId(UUID(payload.user_id))
        except (JWTError, ValueError) as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
