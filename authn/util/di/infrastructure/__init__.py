"""Infrastructure providers."""

# Import bases
from .federated import FederatedProviderRegistry
from .google import GoogleProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .google import ProdGoogleProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "FederatedProviderRegistry",
    "GoogleProvider",
    "PersistenceProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
]
