"""Request authentication.

Resolves the ``Authorization: Token <jwt>`` header into a SecurityContext
for each request. A missing or invalid token yields an anonymous context;
use cases that need a user reject it themselves.
"""

from dishka import Provider, Scope, provide
from fastapi import Request

from conduit.application.security import SecurityContext
from conduit.domain.service import JWTService

AUTH_SCHEME = "Token"


def extract_token(authorization: str | None) -> str | None:
    """Return the token from a ``Token <jwt>`` header value, if well formed.

    Args:
        authorization: Raw ``Authorization`` header

    Returns:
        The token, or None if the header is missing or uses another scheme
    """
    if not authorization:
        return None

    scheme, _, token = authorization.strip().partition(" ")
    if scheme != AUTH_SCHEME or not token.strip():
        return None
    return token.strip()


class SecurityProvider(Provider):
    """Provides the caller's SecurityContext from the current HTTP request."""

    @provide(scope=Scope.REQUEST)
    def get_security_context(
        self, request: Request, jwt_service: JWTService
    ) -> SecurityContext:
        token = extract_token(request.headers.get("Authorization"))
        user_id = jwt_service.get_user_id_from_token(token)
        if user_id is None:
            return SecurityContext.anonymous()
        return SecurityContext.for_user(user_id)
