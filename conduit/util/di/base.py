"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, Type

from dishka import Provider

from conduit.util.error import DependencyInjectionError

# Infrastructure components that tests may swap for fakes
Component = Literal["persistence", "password"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with no subclasses is concrete and used as-is. A provider
    class with subclasses is a swappable component: it names itself with
    ``__mock_component__`` and each subclass declares ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_component(cls) -> bool:
        """Whether this provider has interchangeable implementations."""
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> Type["ProviderBase"]:
        """Pick the provider class to instantiate.

        Args:
            use_mock: Select the fake implementation of a component

        Returns:
            The class itself for concrete providers, otherwise the matching
            subclass

        Raises:
            DependencyInjectionError: If no subclass matches
        """
        if not cls.is_component():
            return cls

        for impl in cls.__subclasses__():
            if impl.__is_mock__ == use_mock:
                return impl

        kind = "mock" if use_mock else "production"
        raise DependencyInjectionError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
