"""Dependency injection container."""

from collections.abc import Collection

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from remark.util.di import PROVIDERS, Component, get_provider


def build_providers(mocked: Collection[Component] = ()) -> list[Provider]:
    """Instantiate every provider in PROVIDERS.

    Args:
        mocked: Components to serve from their mock implementation

    Returns:
        Provider instances (all take no constructor arguments)
    """
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the application container.

    Settings are loaded from environment variables automatically. Production
    passes nothing; the test suite mocks components by name.

    Returns:
        Configured DI container, including FastapiProvider so it can back the app
    """
    return make_async_container(*build_providers(mocked), FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
