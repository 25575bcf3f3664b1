"""Dependency injection.

``PROVIDERS`` lists every provider of the container. Most have a single
implementation. A swappable component is a base class naming the component
in ``__mock_component__``; its subclasses are the production and the test
implementation, told apart by ``__is_mock__``.
"""

from devconnect.util.di.application import ProdApplicationProvider
from devconnect.util.di.base import Component, ProviderBase
from devconnect.util.di.core import ProdConfigProvider
from devconnect.util.di.domain import ProdDomainProvider
from devconnect.util.di.infrastructure import (
    GithubProvider,
    PersistenceProvider,
    ProdGithubProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    GithubProvider,
    PersistenceProvider,
]


def swappable_components() -> set[Component]:
    """Names of the components that have a test implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def get_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Resolve an entry of ``PROVIDERS`` to the class to instantiate.

    Raises:
        ValueError: If a component lacks the requested implementation
    """
    implementations = {c.__is_mock__: c for c in base.__subclasses__()}
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "test" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {base.__mock_component__}"
        ) from None


def build_providers(mocked: set[Component] | None = None) -> list[ProviderBase]:
    """One provider instance per entry of ``PROVIDERS``.

    Components named in ``mocked`` get their test implementation.
    """
    mocked = mocked or set()
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "GithubProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdGithubProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "build_providers",
    "get_provider",
    "swappable_components",
]
