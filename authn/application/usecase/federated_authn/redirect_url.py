"""Third-party redirect URL use case."""

from pydantic import BaseModel

from authn.application.usecase.base import BaseUseCase
from authn.domain.service import FederatedAuthnService, PlatformService

from .platform import resolve_platform_id_for_host


class GetRedirectUrlRequest(BaseModel):
    """Request for the redirect URL registered with providers."""

    host: str | None


class GetRedirectUrlResponse(BaseModel):
    """Redirect URL response."""

    redirect_url: str


class GetRedirectUrlUseCase(
    BaseUseCase[GetRedirectUrlRequest, GetRedirectUrlResponse]
):
    """Use case for showing admins which redirect URI to register."""

    def __init__(
        self,
        federated_authn_service: FederatedAuthnService,
        platform_service: PlatformService,
    ) -> None:
        self.federated_authn_service = federated_authn_service
        self.platform_service = platform_service

    async def execute(self, request: GetRedirectUrlRequest) -> GetRedirectUrlResponse:
        platform_id = await resolve_platform_id_for_host(
            self.platform_service, request.host
        )
        redirect_url = await self.federated_authn_service.get_third_party_redirect_url(
            platform_id
        )
        return GetRedirectUrlResponse(redirect_url=redirect_url)
