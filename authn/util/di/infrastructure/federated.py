"""Registry of federated authn adapters."""

from dishka import Scope, provide

from authn.adapter.google.client import GoogleAuthnProvider
from authn.domain.service import FederatedAuthnProvider
from authn.domain.value import ThirdPartyAuthnProvider
from authn.util.di.base import ProviderBase


class FederatedProviderRegistry(ProviderBase):
    """Provider that aggregates all federated adapters into a dictionary."""

    @provide(scope=Scope.REQUEST)
    def get_federated_providers(
        self,
        google_authn_provider: GoogleAuthnProvider,
    ) -> dict[ThirdPartyAuthnProvider, FederatedAuthnProvider]:
        """Provide dictionary of all federated adapters by provider.

        Providers missing from the dictionary are rejected as unsupported.

        Args:
            google_authn_provider: Google adapter (specific type)

        Returns:
            Dictionary mapping ThirdPartyAuthnProvider to its adapter
        """
        return {
            ThirdPartyAuthnProvider.GOOGLE: google_authn_provider,
        }
