"""Federated authentication domain service.

Routes login and claim requests to the adapter registered for a third-party
provider, resolving which OAuth client to use along the way: a platform's own
client when the request is bound to a platform, the process-wide client
otherwise.
"""

import logfire

from authn.config import AuthSettings
from authn.domain.error import PreconditionFailedError, UnsupportedProviderError
from authn.domain.value import (
    AuthenticationResponse,
    ClientCredentials,
    FederatedAuthnLoginResponse,
    FederatedAuthnParams,
    FederatedIdentity,
    PlatformId,
    ThirdPartyAuthnProvider,
    UserIdentityProvider,
)
from authn.util.error import ConfigurationError

from .authentication_service import AuthenticationService
from .base import Service
from .domain_helper import DomainHelper
from .platform_service import PlatformService

THIRD_PARTY_REDIRECT_PATH = "/redirect"

# Stored on users whose provider did not share their name
DEFAULT_FIRST_NAME = "john"
DEFAULT_LAST_NAME = "doe"


class FederatedAuthnProvider:
    """Interface for third-party identity provider adapters."""

    async def get_login_url(self, client_id: str, platform_id: PlatformId | None) -> str:
        """Build the provider's authorization URL.

        Args:
            client_id: OAuth client ID to request authorization for
            platform_id: Platform the login is for, if any

        Returns:
            URL to redirect the browser to
        """
        raise NotImplementedError

    async def authenticate(
        self,
        client_id: str,
        client_secret: str,
        authorization_code: str,
        platform_id: PlatformId | None,
    ) -> FederatedIdentity:
        """Exchange an authorization code for a verified identity.

        Args:
            client_id: OAuth client ID
            client_secret: OAuth client secret
            authorization_code: Code from the provider's redirect
            platform_id: Platform the login is for, if any

        Returns:
            Identity with a non-empty email
        """
        raise NotImplementedError


class FederatedAuthnService(Service):
    """Dispatches federated logins to provider adapters."""

    def __init__(
        self,
        providers: dict[ThirdPartyAuthnProvider, FederatedAuthnProvider],
        platform_service: PlatformService,
        authentication_service: AuthenticationService,
        domain_helper: DomainHelper,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize federated authentication service.

        Args:
            providers: Adapter for each supported provider
            platform_service: Platform lookups for per-platform credentials
            authentication_service: Receives verified identities
            domain_helper: Builds platform-scoped URLs
            auth_settings: Process-wide fallback credentials
        """
        self.providers = providers
        self.platform_service = platform_service
        self.authentication_service = authentication_service
        self.domain_helper = domain_helper
        self.auth_settings = auth_settings

    async def login(
        self,
        platform_id: PlatformId | None,
        provider_name: ThirdPartyAuthnProvider,
    ) -> FederatedAuthnLoginResponse:
        """Get the URL that starts a federated login.

        Args:
            platform_id: Platform the login is for, or None
            provider_name: Provider to log in with

        Returns:
            The adapter's login URL, unchanged

        Raises:
            UnsupportedProviderError: If no adapter handles the provider
            ConfigurationError: If fallback credentials are not configured
            NotFoundError: If the platform does not exist
            PreconditionFailedError: If the platform has no client for the provider
        """
        provider = self._get_provider(provider_name)

        with logfire.span(
            "federated_authn.login",
            provider=provider_name.value,
            platform_id=platform_id,
        ):
            credentials = await self._get_client_credentials(platform_id)
            login_url = await provider.get_login_url(
                client_id=credentials.client_id,
                platform_id=platform_id,
            )
            return FederatedAuthnLoginResponse(login_url=login_url)

    async def claim(
        self,
        platform_id: PlatformId | None,
        code: str,
        provider_name: ThirdPartyAuthnProvider,
    ) -> AuthenticationResponse:
        """Complete a federated login with the provider's authorization code.

        Names the provider did not share are replaced with placeholders.
        Nothing is written until the provider has verified the identity.

        Args:
            platform_id: Platform the login is for, or None
            code: Authorization code from the provider redirect
            provider_name: Provider that issued the code

        Returns:
            Response from the authentication service

        Raises:
            UnsupportedProviderError: If no adapter handles the provider
            ConfigurationError: If fallback credentials are not configured
            NotFoundError: If the platform does not exist
            PreconditionFailedError: If the platform has no client for the provider
        """
        provider = self._get_provider(provider_name)

        with logfire.span(
            "federated_authn.claim",
            provider=provider_name.value,
            platform_id=platform_id,
        ):
            credentials = await self._get_client_credentials(platform_id)
            identity = await provider.authenticate(
                client_id=credentials.client_id,
                client_secret=credentials.client_secret,
                authorization_code=code,
                platform_id=platform_id,
            )

            return await self.authentication_service.federated_authn(
                FederatedAuthnParams(
                    email=identity.email,
                    first_name=_or_default(identity.first_name, DEFAULT_FIRST_NAME),
                    last_name=_or_default(identity.last_name, DEFAULT_LAST_NAME),
                    track_events=True,
                    news_letter=True,
                    provider=UserIdentityProvider(provider_name.value),
                    predefined_platform_id=platform_id,
                )
            )

    async def get_third_party_redirect_url(self, platform_id: PlatformId | None) -> str:
        """URL providers send the browser back to after authorization."""
        return await self.domain_helper.get_internal_url(
            path=THIRD_PARTY_REDIRECT_PATH,
            platform_id=platform_id,
        )

    def _get_provider(
        self, provider_name: ThirdPartyAuthnProvider
    ) -> FederatedAuthnProvider:
        provider = self.providers.get(provider_name)
        if provider is None:
            logfire.warn("Unsupported federated provider", provider=str(provider_name))
            raise UnsupportedProviderError(provider_name)
        return provider

    async def _get_client_credentials(
        self, platform_id: PlatformId | None
    ) -> ClientCredentials:
        """Resolve the Google OAuth client for a request.

        Never cached: a platform admin may rotate credentials at any time.
        """
        if platform_id is None:
            google = self.auth_settings.google
            if not google.client_id:
                raise ConfigurationError("AUTH__GOOGLE__CLIENT_ID")
            if not google.client_secret:
                raise ConfigurationError("AUTH__GOOGLE__CLIENT_SECRET")
            return ClientCredentials(
                client_id=google.client_id, client_secret=google.client_secret
            )

        platform = await self.platform_service.get_one_or_throw(platform_id)
        credentials = platform.federated_auth_providers.google
        if credentials is None:
            raise PreconditionFailedError("Google client information is not defined")
        return credentials


def _or_default(value: str | None, default: str) -> str:
    return default if value is None else value
