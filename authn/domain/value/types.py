"""Domain value objects for federated authentication.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import ConfigDict, Field, field_validator

from authn.domain.value.common import ValueObject
from authn.domain.value.identifiers import PlatformId


class ThirdPartyAuthnProvider(str, Enum):
    """Third-party identity providers a login can be federated to.

    SAML logins go through a separate assertion flow and are not
    handled by the OAuth dispatcher.
    """

    GOOGLE = "google"
    SAML = "saml"


class UserIdentityProvider(str, Enum):
    """How a user's identity was established."""

    EMAIL = "email"
    GOOGLE = "google"
    SAML = "saml"


class ClientCredentials(ValueObject):
    """OAuth client ID and secret for a provider."""

    client_id: str
    client_secret: str = Field(repr=False)


class FederatedAuthProviders(ValueObject):
    """Per-platform credential overrides for third-party providers.

    Stored records may carry entries for providers without an OAuth
    adapter (e.g. ``saml``); those are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    google: ClientCredentials | None = None


class FederatedIdentity(ValueObject):
    """Identity returned by a provider after an authorization code exchange."""

    email: str
    first_name: str | None = None
    last_name: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email is present."""
        if not v:
            raise ValueError("Email must not be empty")
        return v


class FederatedAuthnParams(ValueObject):
    """Input to the authentication service for a federated identity.

    ``predefined_platform_id`` has no default: callers must say either which
    platform the user belongs to, or ``None`` for "no predefined platform".
    """

    email: str
    first_name: str
    last_name: str
    track_events: bool
    news_letter: bool
    provider: UserIdentityProvider
    predefined_platform_id: PlatformId | None


class FederatedAuthnLoginResponse(ValueObject):
    """Where to send the browser to start a federated login."""

    login_url: str


class AuthenticationResponse(ValueObject):
    """Result of a successful sign-in or sign-up."""

    token: str
    user_id: str
    email: str
    first_name: str
    last_name: str
    platform_id: PlatformId | None
