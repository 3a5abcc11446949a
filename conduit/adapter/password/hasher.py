"""Bcrypt password hashing adapter."""

import bcrypt
import logfire

from conduit.domain.service.password import PasswordHasher

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """PasswordHasher backed by bcrypt.

    Each hash carries its own random salt and work factor, so stored hashes
    stay verifiable after ``rounds`` is raised.
    """

    def __init__(self, rounds: int = 12) -> None:
        """Initialize hasher.

        Args:
            rounds: Bcrypt cost factor (log2 of the iteration count)
        """
        self.rounds = rounds

    def hash(self, password: str) -> str:
        if not password:
            raise ValueError("Password must not be empty")

        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password_hash: str, password: str) -> bool:
        if not password or not password_hash:
            return False

        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError:
            logfire.warn("Stored password hash is not a bcrypt hash")
            return False


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]
