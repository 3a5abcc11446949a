"""Dependency injection wiring.

``PROVIDERS`` lists every provider the application is assembled from.
Swappable components (persistence, password hashing) appear as their base
class; ``ProviderBase.implementation`` resolves the concrete subclass.
"""

from typing import Type

from conduit.util.di.application import ProdApplicationProvider
from conduit.util.di.base import Component, ProviderBase
from conduit.util.di.core import ProdConfigProvider
from conduit.util.di.domain import ProdDomainProvider
from conduit.util.di.infrastructure import PasswordProvider, PersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    PasswordProvider,
]


def components() -> set[Component]:
    """Names of every swappable component."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_component() and base.__mock_component__
    }


__all__ = [
    "Component",
    "PROVIDERS",
    "PasswordProvider",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProviderBase",
    "components",
]
