"""Federated login use case."""

import logfire
from pydantic import BaseModel

from authn.application.usecase.base import BaseUseCase
from authn.domain.service import FederatedAuthnService, PlatformService
from authn.domain.value import ThirdPartyAuthnProvider

from .platform import resolve_platform_id_for_host


class FederatedLoginRequest(BaseModel):
    """Start a federated login from a given host."""

    host: str | None  # Request host, used to detect custom-domain platforms
    provider_name: ThirdPartyAuthnProvider


class FederatedLoginResponse(BaseModel):
    """Federated login response."""

    login_url: str


class FederatedLoginUseCase(
    BaseUseCase[FederatedLoginRequest, FederatedLoginResponse]
):
    """Use case for starting a federated login."""

    def __init__(
        self,
        federated_authn_service: FederatedAuthnService,
        platform_service: PlatformService,
    ) -> None:
        self.federated_authn_service = federated_authn_service
        self.platform_service = platform_service

    async def execute(self, request: FederatedLoginRequest) -> FederatedLoginResponse:
        """Resolve the platform for the host and build the provider login URL."""
        platform_id = await resolve_platform_id_for_host(
            self.platform_service, request.host
        )
        logfire.info(
            "Federated login requested",
            provider=request.provider_name.value,
            platform_id=platform_id,
        )
        response = await self.federated_authn_service.login(
            platform_id=platform_id, provider_name=request.provider_name
        )
        return FederatedLoginResponse(login_url=response.login_url)
