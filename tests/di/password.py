"""Mock password hashing provider for testing."""

from dishka import Scope, provide

from conduit.adapter.password import BcryptPasswordHasher
from conduit.domain.service import PasswordHasher
from conduit.util.di.infrastructure.password import PasswordProvider

# bcrypt's minimum work factor keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


class MockPasswordProvider(PasswordProvider):
    """Real bcrypt hashing at the cheapest cost."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        """Provide a fast bcrypt password hasher."""
        return BcryptPasswordHasher(rounds=TEST_BCRYPT_ROUNDS)
