"""Password hashing adapters."""

from .hasher import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher"]
