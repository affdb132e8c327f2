"""Federated claim use case."""

from pydantic import BaseModel

from authn.application.usecase.base import BaseUseCase
from authn.domain.service import FederatedAuthnService, PlatformService
from authn.domain.value import (
    AuthenticationResponse,
    PlatformId,
    ThirdPartyAuthnProvider,
)

from .platform import resolve_platform_id_for_host


class FederatedClaimRequest(BaseModel):
    """Complete a federated login with an authorization code."""

    host: str | None
    provider_name: ThirdPartyAuthnProvider
    code: str


class FederatedClaimResponse(BaseModel):
    """Federated claim response."""

    token: str
    user_id: str
    email: str
    first_name: str
    last_name: str
    platform_id: PlatformId | None


class FederatedClaimUseCase(
    BaseUseCase[FederatedClaimRequest, FederatedClaimResponse]
):
    """Use case for exchanging an authorization code for a session."""

    def __init__(
        self,
        federated_authn_service: FederatedAuthnService,
        platform_service: PlatformService,
    ) -> None:
        self.federated_authn_service = federated_authn_service
        self.platform_service = platform_service

    async def execute(self, request: FederatedClaimRequest) -> FederatedClaimResponse:
        """Execute federated claim.

        Args:
            request: Host, provider and authorization code

        Returns:
            Session token and user details

        Raises:
            UnsupportedProviderError, NotFoundError, PreconditionFailedError,
            ConfigurationError, ProviderError: propagated unchanged
        """
        platform_id = await resolve_platform_id_for_host(
            self.platform_service, request.host
        )
        result: AuthenticationResponse = await self.federated_authn_service.claim(
            platform_id=platform_id,
            code=request.code,
            provider_name=request.provider_name,
        )
        return FederatedClaimResponse(**result.model_dump())
