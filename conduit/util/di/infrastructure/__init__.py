"""Infrastructure providers."""

# Import bases
from .password import PasswordProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .password import ProdPasswordProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "PasswordProvider",
    "PersistenceProvider",
    "ProdPasswordProvider",
    "ProdPersistenceProvider",
]
