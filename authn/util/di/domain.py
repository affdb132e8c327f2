"""Domain layer DI providers."""

from dishka import Scope, provide

from authn.config import AuthSettings, Settings
from authn.domain.repository import PlatformRepository, UserRepository
from authn.domain.service import (
    AuthenticationService,
    DomainHelper,
    FederatedAuthnProvider,
    FederatedAuthnService,
    JWTService,
    PlatformService,
)
from authn.domain.value import ThirdPartyAuthnProvider
from authn.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_platform_service(
        self, platform_repository: PlatformRepository
    ) -> PlatformService:
        """Provide platform domain service."""
        return PlatformService(platform_repository=platform_repository)

    @provide
    def get_domain_helper(
        self, platform_service: PlatformService, settings: Settings
    ) -> DomainHelper:
        """Provide domain helper."""
        return DomainHelper(platform_service=platform_service, settings=settings)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_authentication_service(
        self,
        user_repository: UserRepository,
        platform_service: PlatformService,
        jwt_service: JWTService,
    ) -> AuthenticationService:
        """Provide authentication domain service."""
        return AuthenticationService(
            user_repository=user_repository,
            platform_service=platform_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_federated_authn_service(
        self,
        providers: dict[ThirdPartyAuthnProvider, FederatedAuthnProvider],
        platform_service: PlatformService,
        authentication_service: AuthenticationService,
        domain_helper: DomainHelper,
        auth_settings: AuthSettings,
    ) -> FederatedAuthnService:
        """Provide federated authentication domain service.

        Args:
            providers: Dictionary mapping providers to their adapters

        Returns:
            FederatedAuthnService configured with all available adapters
        """
        return FederatedAuthnService(
            providers=providers,
            platform_service=platform_service,
            authentication_service=authentication_service,
            domain_helper=domain_helper,
            auth_settings=auth_settings,
        )
