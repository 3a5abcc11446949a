"""Mock providers for testing."""

from .password import MockPasswordProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockPasswordProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
