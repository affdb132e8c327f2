"""Google OAuth 2.0 / OpenID Connect client implementation.

Exchanges an authorization code for an ID token and verifies the token
against Google's published signing keys.
"""

from urllib.parse import urlencode

import httpx
import jwt
import logfire

from authn.adapter.error import ProviderError
from authn.domain.service.domain_helper import DomainHelper
from authn.domain.service.federated_authn_service import (
    THIRD_PARTY_REDIRECT_PATH,
    FederatedAuthnProvider,
)
from authn.domain.value import FederatedIdentity, PlatformId

GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")


class GoogleAuthnError(ProviderError):
    """Google OAuth error."""

    pass


class GoogleAuthnProvider(FederatedAuthnProvider):
    """Base class for Google authn providers.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleAuthnProvider(GoogleAuthnProvider):
    """Google sign-in using the authorization code flow."""

    authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
    token_url = "https://oauth2.googleapis.com/token"
    jwks_url = "https://www.googleapis.com/oauth2/v3/certs"

    def __init__(self, domain_helper: DomainHelper, timeout: float = 30.0) -> None:
        """Initialize Google authn provider.

        Args:
            domain_helper: Builds the platform-scoped redirect URI
            timeout: HTTP timeout in seconds for calls to Google
        """
        self.domain_helper = domain_helper
        self.timeout = timeout

    async def get_login_url(self, client_id: str, platform_id: PlatformId | None) -> str:
        """Build the Google authorization URL.

        Args:
            client_id: Google OAuth client ID
            platform_id: Platform the login is for, if any

        Returns:
            Authorization URL to redirect the user to
        """
        redirect_uri = await self._get_redirect_uri(platform_id)
        params = {
            "client_id": client_id,
            "redirect_uri": redirect_uri,
            "scope": "email profile",
            "response_type": "code",
        }

        logfire.info(
            "Google login URL built",
            redirect_uri=redirect_uri,
            platform_id=platform_id,
        )

        return f"{self.authorize_url}?{urlencode(params)}"

    async def authenticate(
        self,
        client_id: str,
        client_secret: str,
        authorization_code: str,
        platform_id: PlatformId | None,
    ) -> FederatedIdentity:
        """Exchange an authorization code for the user's verified identity.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            authorization_code: Code from Google's redirect
            platform_id: Platform the login is for, if any

        Returns:
            Email and names from the ID token

        Raises:
            GoogleAuthnError: If the exchange fails or the token is invalid
        """
        redirect_uri = await self._get_redirect_uri(platform_id)
        id_token = await self._exchange_code_for_id_token(
            client_id, client_secret, authorization_code, redirect_uri
        )
        claims = await self._verify_id_token(id_token, client_id)

        email = claims.get("email")
        if not email:
            raise GoogleAuthnError("Google ID token has no email")

        logfire.info("Google authentication completed", platform_id=platform_id)

        return FederatedIdentity(
            email=email,
            first_name=claims.get("given_name"),
            last_name=claims.get("family_name"),
        )

    async def _get_redirect_uri(self, platform_id: PlatformId | None) -> str:
        return await self.domain_helper.get_internal_url(
            path=THIRD_PARTY_REDIRECT_PATH, platform_id=platform_id
        )

    async def _exchange_code_for_id_token(
        self,
        client_id: str,
        client_secret: str,
        authorization_code: str,
        redirect_uri: str,
    ) -> str:
        """Exchange authorization code for an ID token.

        Raises:
            GoogleAuthnError: If token exchange fails
        """
        data = {
            "code": authorization_code,
            "client_id": client_id,
            "client_secret": client_secret,
            "redirect_uri": redirect_uri,
            "grant_type": "authorization_code",
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url, data=data, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise GoogleAuthnError(f"HTTP error during token exchange: {e}")

        if response.status_code != 200:
            logfire.error(
                "Google token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleAuthnError(f"Token exchange failed: {response.status_code}")

        id_token = _json_object(response, "token response").get("id_token")
        if not id_token:
            raise GoogleAuthnError("Token response has no id_token")
        return id_token

    async def _fetch_signing_keys(self) -> dict:
        """Fetch Google's JSON Web Key Set.

        Raises:
            GoogleAuthnError: If the key set cannot be fetched
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self.jwks_url, timeout=self.timeout)
        except httpx.HTTPError as e:
            logfire.error("Google JWKS HTTP error", error=str(e))
            raise GoogleAuthnError(f"HTTP error fetching signing keys: {e}")

        if response.status_code != 200:
            raise GoogleAuthnError(
                f"Signing key request failed: {response.status_code}"
            )
        return _json_object(response, "signing key response")

    async def _verify_id_token(self, id_token: str, client_id: str) -> dict:
        """Verify an ID token's signature, audience, issuer and expiry.

        Returns:
            Token claims

        Raises:
            GoogleAuthnError: If the token fails verification
        """
        try:
            kid = jwt.get_unverified_header(id_token).get("kid")
        except jwt.InvalidTokenError as e:
            raise GoogleAuthnError(f"Malformed ID token: {e}")

        try:
            jwks = jwt.PyJWKSet.from_dict(await self._fetch_signing_keys())
        except jwt.PyJWKSetError as e:
            raise GoogleAuthnError(f"Unusable Google signing keys: {e}")
        signing_key = next((k for k in jwks.keys if k.key_id == kid), None)
        if signing_key is None:
            raise GoogleAuthnError(f"No Google signing key matches kid {kid}")

        try:
            claims = jwt.decode(
                id_token,
                signing_key.key,
                algorithms=["RS256"],
                audience=client_id,
            )
        except jwt.InvalidTokenError as e:
            logfire.warn("Google ID token rejected", error=str(e))
            raise GoogleAuthnError(f"Invalid ID token: {e}")

        if claims.get("iss") not in GOOGLE_ISSUERS:
            raise GoogleAuthnError(f"Unexpected ID token issuer: {claims.get('iss')}")
        return claims


def _json_object(response: httpx.Response, what: str) -> dict:
    """Parse a 200 response that must carry a JSON object."""
    try:
        payload = response.json()
    except ValueError as e:
        # Proxies and captive portals answer 200 with HTML
        raise GoogleAuthnError(f"Malformed Google {what}: {e}")
    if not isinstance(payload, dict):
        raise GoogleAuthnError(f"Malformed Google {what}: expected a JSON object")
    return payload


class MockGoogleAuthnProvider(GoogleAuthnProvider):
    """Mock Google authn provider for testing.

    Returns deterministic test data without making real API calls.
    """

    async def get_login_url(self, client_id: str, platform_id: PlatformId | None) -> str:
        """Return mock authorization URL."""
        params = {"client_id": client_id, "mock": "true"}
        if platform_id is not None:
            params["platform_id"] = platform_id
        return f"https://accounts.google.com/o/oauth2/v2/auth?{urlencode(params)}"

    async def authenticate(
        self,
        client_id: str,
        client_secret: str,
        authorization_code: str,
        platform_id: PlatformId | None,
    ) -> FederatedIdentity:
        """Return mock identity information."""
        return FederatedIdentity(
            email="mock.user@gmail.com",
            first_name="Mock",
            last_name=None,
        )
