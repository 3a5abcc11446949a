"""Password hashing port."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """One-way, salted password hashing.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password (must not be empty)

        Returns:
            Encoded hash including its salt

        Raises:
            ValueError: If the password is empty
        """
        pass

    @abstractmethod
    def verify(self, password_hash: str, password: str) -> bool:
        """Check a plaintext password against a stored hash.

        Args:
            password_hash: Hash produced by ``hash``
            password: Plaintext password to check

        Returns:
            True if the password matches, False otherwise (including
            malformed hashes)
        """
        pass
