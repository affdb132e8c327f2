"""Unit tests for federated authn routes."""

import pytest
from dishka import Provider, Scope, provide
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from authn.adapter.google.client import (
    GoogleAuthnError,
    GoogleAuthnProvider,
    MockGoogleAuthnProvider,
)
from authn.config import AuthSettings, Settings
from authn.domain.error import DomainError
from authn.domain.repository import PlatformRepository, UserRepository
from authn.domain.value import ClientCredentials
from authn.interface.api.app import create_app
from authn.interface.api.routes.federated_authn import _to_http_exception
from authn.persistence.repository.inmemory import (
    InMemoryPlatformRepository,
    InMemoryUserRepository,
)
from authn.util.error import ConfigurationError
from tests.factories import make_platform
from tests.di import build_test_container


class FixtureProvider(Provider):
    """Pins settings and shares repositories across requests of one test."""

    def __init__(self, settings: Settings, platforms: PlatformRepository):
        super().__init__()
        self.settings = settings
        self.platforms = platforms
        self.users = InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_settings(self) -> Settings:
        return self.settings

    @provide(scope=Scope.APP)
    def get_platform_repository(self) -> PlatformRepository:
        return self.platforms

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return self.users


class RejectingGoogleAuthnProvider(MockGoogleAuthnProvider):
    """Google answers every code with an invalid ID token."""

    async def authenticate(
        self, client_id, client_secret, authorization_code, platform_id
    ):
        raise GoogleAuthnError("Invalid ID token: Signature verification failed")


class RejectingGoogleProvider(Provider):
    @provide(scope=Scope.APP)
    def get_google_authn_provider(self) -> GoogleAuthnProvider:
        return RejectingGoogleAuthnProvider()


@pytest.fixture
def platform_repo():
    return InMemoryPlatformRepository()


def _client(
    settings: Settings,
    platform_repo,
    base_url: str = "http://testserver",
    extra_providers: tuple[Provider, ...] = (),
):
    container = build_test_container(
        extra_providers=[
            FastapiProvider(),
            FixtureProvider(settings, platform_repo),
            *extra_providers,
        ]
    )
    app = create_app(settings=settings, container=container)
    return TestClient(app, base_url=base_url)


class TestLoginRoute:
    """Tests for GET /v1/authn/federated/login."""

    def test_returns_login_url(self, settings, platform_repo):
        client = _client(settings, platform_repo)

        response = client.get(
            "/v1/authn/federated/login", params={"provider_name": "google"}
        )

        assert response.status_code == 200
        login_url = response.json()["login_url"]
        assert "mock=true" in login_url
        assert "client_id=global-client" in login_url

    def test_custom_domain_uses_platform_client(self, settings, platform_repo):
        """Should bind the login to the platform serving the request host."""
        platform_repo._platforms["p1"] = make_platform(
            "p1",
            custom_domain="flows.acme.com",
            google=ClientCredentials(client_id="acme-client", client_secret="s"),
        )
        client = _client(settings, platform_repo, base_url="http://flows.acme.com")

        response = client.get(
            "/v1/authn/federated/login", params={"provider_name": "google"}
        )

        assert response.status_code == 200
        login_url = response.json()["login_url"]
        assert "client_id=acme-client" in login_url
        assert "platform_id=p1" in login_url

    def test_saml_is_unsupported(self, settings, platform_repo):
        client = _client(settings, platform_repo)

        response = client.get(
            "/v1/authn/federated/login", params={"provider_name": "saml"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Unsupported provider: saml"

    def test_unknown_provider_name_is_rejected(self, settings, platform_repo):
        client = _client(settings, platform_repo)

        response = client.get(
            "/v1/authn/federated/login", params={"provider_name": "github"}
        )

        assert response.status_code == 422

    def test_platform_without_google_client_is_412(self, settings, platform_repo):
        platform_repo._platforms["p1"] = make_platform(
            "p1", custom_domain="flows.acme.com"
        )
        client = _client(settings, platform_repo, base_url="http://flows.acme.com")

        response = client.get(
            "/v1/authn/federated/login", params={"provider_name": "google"}
        )

        assert response.status_code == 412

    def test_missing_fallback_client_is_500(self, platform_repo):
        settings = Settings(environment="test", auth=AuthSettings())
        client = _client(settings, platform_repo)

        response = client.get(
            "/v1/authn/federated/login", params={"provider_name": "google"}
        )

        assert response.status_code == 500
        assert "GOOGLE" not in response.json()["detail"]


class TestClaimRoute:
    """Tests for POST /v1/authn/federated/claim."""

    def test_signs_up_new_user(self, settings, platform_repo):
        client = _client(settings, platform_repo)

        response = client.post(
            "/v1/authn/federated/claim",
            json={"provider_name": "google", "code": "xyz"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "mock.user@gmail.com"
        assert data["first_name"] == "Mock"
        assert data["last_name"] == "doe"
        assert data["token"]
        assert data["platform_id"] is not None

    def test_second_claim_reuses_account(self, settings, platform_repo):
        client = _client(settings, platform_repo)
        body = {"provider_name": "google", "code": "xyz"}

        first = client.post("/v1/authn/federated/claim", json=body).json()
        second = client.post("/v1/authn/federated/claim", json=body).json()

        assert second["user_id"] == first["user_id"]
        assert second["platform_id"] == first["platform_id"]

    def test_rejected_code_is_401(self, settings, platform_repo):
        """Provider failures should not leak their details to the caller."""
        client = _client(
            settings, platform_repo, extra_providers=(RejectingGoogleProvider(),)
        )

        response = client.post(
            "/v1/authn/federated/claim",
            json={"provider_name": "google", "code": "xyz"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Identity provider authentication failed"


class TestRedirectUrlRoute:
    """Tests for GET /v1/authn/federated/redirect-url."""

    def test_default_host(self, settings, platform_repo):
        client = _client(settings, platform_repo)

        response = client.get("/v1/authn/federated/redirect-url")

        assert response.status_code == 200
        assert response.json() == {"redirect_url": "http://localhost:4200/redirect"}

    def test_custom_domain_host(self, settings, platform_repo):
        platform_repo._platforms["p1"] = make_platform(
            "p1", custom_domain="flows.acme.com"
        )
        client = _client(settings, platform_repo, base_url="http://flows.acme.com")

        response = client.get("/v1/authn/federated/redirect-url")

        assert response.json() == {"redirect_url": "http://flows.acme.com/redirect"}


def test_health(settings, platform_repo):
    client = _client(settings, platform_repo)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["environment"] == "test"


class TestErrorMapping:
    """Tests for mapping federated authn errors to HTTP errors."""

    def test_unexpected_domain_error_is_generic_500(self):
        error = _to_http_exception(DomainError("platform table is corrupt"))

        assert error.status_code == 500
        assert error.detail == "Internal server error"

    def test_configuration_error_is_500_not_configured(self):
        error = _to_http_exception(ConfigurationError("GOOGLE_CLIENT_ID"))

        assert error.status_code == 500
        assert error.detail == "Federated authentication is not configured"
