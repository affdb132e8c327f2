"""Dependency injection wiring."""

from typing import Type

from authn.util.di.application import ProdApplicationProvider
from authn.util.di.base import Component, ProviderBase
from authn.util.di.core import ProdConfigProvider
from authn.util.di.domain import ProdDomainProvider
from authn.util.di.infrastructure import (
    FederatedProviderRegistry,
    GoogleProvider,
    PersistenceProvider,
    ProdGoogleProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable: production or mock implementation
    GoogleProvider,
    PersistenceProvider,
    # Maps ThirdPartyAuthnProvider -> adapter
    FederatedProviderRegistry,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of a provider listed in ``PROVIDERS``.

    Concrete providers (no subclasses) are returned unchanged. For a
    swappable component, the subclass whose ``__is_mock__`` equals
    ``use_mock`` is returned. Mock subclasses only exist once the test
    package defining them has been imported.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "FederatedProviderRegistry",
    "GoogleProvider",
    "PersistenceProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
]
