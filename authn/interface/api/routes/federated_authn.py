"""Federated authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from authn.adapter.error import ProviderError
from authn.application.usecase.federated_authn import (
    FederatedClaimUseCase,
    FederatedLoginUseCase,
    GetRedirectUrlUseCase,
)
from authn.application.usecase.federated_authn.claim import (
    FederatedClaimRequest,
    FederatedClaimResponse,
)
from authn.application.usecase.federated_authn.login import (
    FederatedLoginRequest,
    FederatedLoginResponse,
)
from authn.application.usecase.federated_authn.redirect_url import (
    GetRedirectUrlRequest,
    GetRedirectUrlResponse,
)
from authn.domain.error import (
    DomainError,
    NotFoundError,
    PreconditionFailedError,
    UnsupportedProviderError,
)
from authn.domain.value import ThirdPartyAuthnProvider
from authn.util.error import ConfigurationError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/v1/authn/federated",
    tags=["federated-authn"],
    route_class=DishkaRoute,
)


class ClaimBody(BaseModel):
    """Body of a claim request, posted by the frontend's /redirect page."""

    provider_name: ThirdPartyAuthnProvider
    code: str


@router.get("/login", response_model=FederatedLoginResponse)
async def login(
    provider_name: ThirdPartyAuthnProvider,
    request: Request,
    login_use_case: FromDishka[FederatedLoginUseCase],
) -> FederatedLoginResponse:
    """Get the URL that starts a federated login.

    The platform is resolved from the request host, so logins on a
    platform's custom domain use that platform's OAuth client.

    Example:
        GET /v1/authn/federated/login?provider_name=google

        Response:
        {
            "login_url": "https://accounts.google.com/o/oauth2/v2/auth?..."
        }
    """
    try:
        return await login_use_case.execute(
            FederatedLoginRequest(
                host=request.url.hostname, provider_name=provider_name
            )
        )
    except (DomainError, ProviderError, ConfigurationError) as e:
        raise _to_http_exception(e)


@router.post("/claim", response_model=FederatedClaimResponse)
async def claim(
    body: ClaimBody,
    request: Request,
    claim_use_case: FromDishka[FederatedClaimUseCase],
) -> FederatedClaimResponse:
    """Exchange an authorization code for a session.

    Example:
        POST /v1/authn/federated/claim
        {
            "provider_name": "google",
            "code": "4/0AeaYSH..."
        }

        Response:
        {
            "token": "eyJ...",
            "user_id": "...",
            "email": "ada@example.com",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "platform_id": "..."
        }
    """
    try:
        return await claim_use_case.execute(
            FederatedClaimRequest(
                host=request.url.hostname,
                provider_name=body.provider_name,
                code=body.code,
            )
        )
    except (DomainError, ProviderError, ConfigurationError) as e:
        raise _to_http_exception(e)


@router.get("/redirect-url", response_model=GetRedirectUrlResponse)
async def redirect_url(
    request: Request,
    redirect_url_use_case: FromDishka[GetRedirectUrlUseCase],
) -> GetRedirectUrlResponse:
    """Redirect URI that platform admins register with their OAuth client."""
    return await redirect_url_use_case.execute(
        GetRedirectUrlRequest(host=request.url.hostname)
    )


def _to_http_exception(error: Exception) -> HTTPException:
    """Map a failed federated authn call to an HTTP error."""
    if isinstance(error, UnsupportedProviderError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, PreconditionFailedError):
        return HTTPException(
            status_code=status.HTTP_412_PRECONDITION_FAILED, detail=str(error)
        )
    if isinstance(error, ProviderError):
        logger.warning("Identity provider rejected login: %s", error)
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Identity provider authentication failed",
        )
    if isinstance(error, ConfigurationError):
        logger.error("Federated authn misconfigured: %s", error)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Federated authentication is not configured",
        )

    logger.error("Unhandled federated authn error: %r", error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )
