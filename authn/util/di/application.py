"""Application layer DI providers."""

from dishka import Scope, provide

from authn.application.usecase.federated_authn import (
    FederatedClaimUseCase,
    FederatedLoginUseCase,
    GetRedirectUrlUseCase,
)
from authn.domain.service import FederatedAuthnService, PlatformService
from authn.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_federated_login_use_case(
        self,
        federated_authn_service: FederatedAuthnService,
        platform_service: PlatformService,
    ) -> FederatedLoginUseCase:
        """Provide federated login use case."""
        return FederatedLoginUseCase(
            federated_authn_service=federated_authn_service,
            platform_service=platform_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_federated_claim_use_case(
        self,
        federated_authn_service: FederatedAuthnService,
        platform_service: PlatformService,
    ) -> FederatedClaimUseCase:
        """Provide federated claim use case."""
        return FederatedClaimUseCase(
            federated_authn_service=federated_authn_service,
            platform_service=platform_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_redirect_url_use_case(
        self,
        federated_authn_service: FederatedAuthnService,
        platform_service: PlatformService,
    ) -> GetRedirectUrlUseCase:
        """Provide third-party redirect URL use case."""
        return GetRedirectUrlUseCase(
            federated_authn_service=federated_authn_service,
            platform_service=platform_service,
        )
