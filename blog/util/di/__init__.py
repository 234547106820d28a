"""Dependency injection module."""

from blog.util.di.application import ProdApplicationProvider
from blog.util.di.base import Component, ProviderBase
from blog.util.di.core import ConfigProvider
from blog.util.di.domain import ProdDomainProvider
from blog.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Order does not matter to dishka; it is kept layer by layer for reading
PROVIDERS: list[type[ProviderBase]] = [
    ConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def components() -> set[Component]:
    """Names of every swappable component."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_component() and base.__mock_component__
    }


def build_providers(mocked: set[Component] | None = None) -> list[ProviderBase]:
    """Instantiate one provider per entry in PROVIDERS.

    Args:
        mocked: Components to serve from their mock implementation

    Returns:
        Provider instances ready for ``make_async_container``

    Raises:
        ValueError: If a component is unknown or has no such implementation
    """
    mocked = mocked or set()
    unknown = mocked - components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        base.implementation(use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "components",
    "ConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
