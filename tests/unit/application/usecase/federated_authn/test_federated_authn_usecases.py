"""Unit tests for federated authn use cases."""

from unittest.mock import AsyncMock

import pytest

from authn.application.usecase.federated_authn import (
    FederatedClaimUseCase,
    FederatedLoginUseCase,
    GetRedirectUrlUseCase,
)
from authn.application.usecase.federated_authn.claim import FederatedClaimRequest
from authn.application.usecase.federated_authn.login import FederatedLoginRequest
from authn.application.usecase.federated_authn.redirect_url import (
    GetRedirectUrlRequest,
)
from authn.domain.service import FederatedAuthnService, PlatformService
from authn.domain.value import (
    AuthenticationResponse,
    FederatedAuthnLoginResponse,
    ThirdPartyAuthnProvider,
)
from authn.persistence.repository.inmemory import InMemoryPlatformRepository
from tests.factories import make_platform


@pytest.fixture
def platform_repo():
    return InMemoryPlatformRepository()


@pytest.fixture
def platform_service(platform_repo):
    return PlatformService(platform_repo)


@pytest.fixture
def federated_authn_service():
    service = AsyncMock(spec=FederatedAuthnService)
    service.login.return_value = FederatedAuthnLoginResponse(
        login_url="https://accounts.google.com/auth?x=1"
    )
    service.claim.return_value = AuthenticationResponse(
        token="jwt",
        user_id="u1",
        email="a@b.com",
        first_name="john",
        last_name="doe",
        platform_id="p1",
    )
    service.get_third_party_redirect_url.return_value = "https://flows.acme.com/redirect"
    return service


class TestFederatedLoginUseCase:
    """Tests for FederatedLoginUseCase."""

    @pytest.mark.asyncio
    async def test_custom_domain_host_resolves_platform(
        self, federated_authn_service, platform_service, platform_repo
    ):
        """Should bind the login to the platform serving the host."""
        # Arrange
        await platform_repo.save(make_platform("p1", custom_domain="flows.acme.com"))
        use_case = FederatedLoginUseCase(federated_authn_service, platform_service)

        # Act
        response = await use_case.execute(
            FederatedLoginRequest(
                host="flows.acme.com", provider_name=ThirdPartyAuthnProvider.GOOGLE
            )
        )

        # Assert
        federated_authn_service.login.assert_awaited_once_with(
            platform_id="p1", provider_name=ThirdPartyAuthnProvider.GOOGLE
        )
        assert response.login_url == "https://accounts.google.com/auth?x=1"

    @pytest.mark.asyncio
    async def test_default_host_has_no_platform(
        self, federated_authn_service, platform_service
    ):
        use_case = FederatedLoginUseCase(federated_authn_service, platform_service)

        await use_case.execute(
            FederatedLoginRequest(
                host="localhost", provider_name=ThirdPartyAuthnProvider.GOOGLE
            )
        )

        federated_authn_service.login.assert_awaited_once_with(
            platform_id=None, provider_name=ThirdPartyAuthnProvider.GOOGLE
        )


class TestFederatedClaimUseCase:
    """Tests for FederatedClaimUseCase."""

    @pytest.mark.asyncio
    async def test_forwards_code_and_returns_session(
        self, federated_authn_service, platform_service, platform_repo
    ):
        await platform_repo.save(make_platform("p1", custom_domain="flows.acme.com"))
        use_case = FederatedClaimUseCase(federated_authn_service, platform_service)

        response = await use_case.execute(
            FederatedClaimRequest(
                host="flows.acme.com",
                provider_name=ThirdPartyAuthnProvider.GOOGLE,
                code="xyz",
            )
        )

        federated_authn_service.claim.assert_awaited_once_with(
            platform_id="p1",
            code="xyz",
            provider_name=ThirdPartyAuthnProvider.GOOGLE,
        )
        assert response.token == "jwt"
        assert response.platform_id == "p1"


class TestGetRedirectUrlUseCase:
    """Tests for GetRedirectUrlUseCase."""

    @pytest.mark.asyncio
    async def test_missing_host_has_no_platform(
        self, federated_authn_service, platform_service
    ):
        use_case = GetRedirectUrlUseCase(federated_authn_service, platform_service)

        response = await use_case.execute(GetRedirectUrlRequest(host=None))

        federated_authn_service.get_third_party_redirect_url.assert_awaited_once_with(
            None
        )
        assert response.redirect_url == "https://flows.acme.com/redirect"
