"""Password hashing infrastructure providers."""

from dishka import Scope, provide

from conduit.adapter.password import BcryptPasswordHasher
from conduit.config import AuthSettings
from conduit.domain.service import PasswordHasher
from conduit.util.di.base import ProviderBase


class PasswordProvider(ProviderBase):
    """Password hashing component base."""

    __mock_component__ = "password"


class ProdPasswordProvider(PasswordProvider):
    """Production password hashing using bcrypt at the configured cost."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_password_hasher(self, auth_settings: AuthSettings) -> PasswordHasher:
        """Provide bcrypt password hasher."""
        return BcryptPasswordHasher(rounds=auth_settings.bcrypt_rounds)
