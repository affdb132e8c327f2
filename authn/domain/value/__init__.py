"""Domain value objects."""

from authn.domain.value.identifiers import PlatformId, UserId
from authn.domain.value.types import (
    AuthenticationResponse,
    ClientCredentials,
    FederatedAuthnLoginResponse,
    FederatedAuthnParams,
    FederatedAuthProviders,
    FederatedIdentity,
    ThirdPartyAuthnProvider,
    UserIdentityProvider,
)

__all__ = [
    # Identifiers
    "PlatformId",
    "UserId",
    # Types
    "AuthenticationResponse",
    "ClientCredentials",
    "FederatedAuthnLoginResponse",
    "FederatedAuthnParams",
    "FederatedAuthProviders",
    "FederatedIdentity",
    "ThirdPartyAuthnProvider",
    "UserIdentityProvider",
]
