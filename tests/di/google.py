"""Mock Google providers for testing."""

from dishka import Scope, provide

from authn.adapter.google.client import GoogleAuthnProvider, MockGoogleAuthnProvider
from authn.util.di.infrastructure.google import GoogleProvider


class MockGoogleProvider(GoogleProvider):
    """Mock Google provider using the deterministic authn client."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_google_authn_provider(self) -> GoogleAuthnProvider:
        """Provide mock Google authn provider."""
        return MockGoogleAuthnProvider()
