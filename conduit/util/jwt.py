"""JWT encoding and decoding (PyJWT)."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from conduit.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by an access token."""

    user_id: str
    email: str
    username: str
    exp: datetime


class JWTError(Exception):
    """Token could not be decoded, is expired, or carries bad claims."""


def create_token(
    user_id: str, email: str, username: str, settings: AuthSettings
) -> str:
    """Sign an access token valid for ``settings.jwt_expiry_days``.

    Args:
        user_id: User ID
        email: User email
        username: Username
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    claims = TokenPayload(
        user_id=user_id,
        email=email,
        username=username,
        exp=datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    )
    return jwt.encode(
        claims.model_dump(), settings.jwt_secret, algorithm=settings.jwt_algorithm
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of ``token`` and return its claims.

    Raises:
        JWTError: If the token is expired, forged, malformed or incomplete
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
        return TokenPayload.model_validate(claims)
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except (jwt.InvalidTokenError, PydanticValidationError) as e:
        raise JWTError("Invalid token") from e
