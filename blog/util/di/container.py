"""Container construction and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from blog.util.di import Component, build_providers


def create_container(mocked: set[Component] | None = None) -> AsyncContainer:
    """Build the application container.

    Args:
        mocked: Components to serve from mocks; production uses none

    Returns:
        Container that can also serve FastAPI requests
    """
    return make_async_container(*build_providers(mocked), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the FastAPI app."""
    setup_dishka(container, app)
