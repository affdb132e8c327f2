"""Google infrastructure providers."""

from dishka import Scope, provide

from authn.adapter.google.client import GoogleAuthnProvider, RealGoogleAuthnProvider
from authn.domain.service import DomainHelper
from authn.util.di.base import ProviderBase


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.REQUEST)
    def get_google_authn_provider(
        self, domain_helper: DomainHelper
    ) -> GoogleAuthnProvider:
        """Provide Google authn provider.

        REQUEST-scoped because the redirect URI depends on the platform,
        which is looked up per request.
        """
        return RealGoogleAuthnProvider(domain_helper=domain_helper)
