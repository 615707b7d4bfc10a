"""Dependency injection module.

Providers are listed once in PROVIDERS. A base class without subclasses
is used as-is; a base with subclasses is a swappable component
(``persistence``, ``mail``) whose production or mock implementation is
picked by ``__is_mock__``.
"""

from typing import Type

from hunt.util.di.application import ProdApplicationProvider
from hunt.util.di.base import Component, ProviderBase
from hunt.util.di.core import ProdConfigProvider
from hunt.util.di.domain import ProdDomainProvider
from hunt.util.di.infrastructure import (
    MailProvider,
    PersistenceProvider,
    ProdMailProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable in tests
    PersistenceProvider,
    MailProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class to instantiate.

    Args:
        base: Entry of PROVIDERS
        use_mock: Pick the mock implementation of a swappable component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = {
        getattr(subclass, "__is_mock__", False): subclass
        for subclass in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component = getattr(base, "__mock_component__", None) or base.__name__
        raise ValueError(f"No {kind} implementation for {component}") from None


__all__ = [
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "get_provider",
    "MailProvider",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdMailProvider",
    "ProdPersistenceProvider",
]
