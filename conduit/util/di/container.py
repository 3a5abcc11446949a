"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from conduit.util.di import PROVIDERS


def create_container(*extra_providers: Provider) -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Args:
        extra_providers: Interface-level providers (e.g. request security)

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [base.implementation()() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to request-scoped factories
    return make_async_container(
        *provider_instances, *extra_providers, FastapiProvider()
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
