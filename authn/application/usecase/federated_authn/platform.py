"""Platform resolution shared by federated authn use cases."""

from authn.domain.service import PlatformService
from authn.domain.value import PlatformId


async def resolve_platform_id_for_host(
    platform_service: PlatformService, host: str | None
) -> PlatformId | None:
    """Map a request host to the platform serving it.

    Args:
        platform_service: Platform domain service
        host: Request host name, without port

    Returns:
        Platform ID if the host is a platform's custom domain, None otherwise
    """
    if not host:
        return None
    platform = await platform_service.get_one_by_custom_domain(host)
    return platform.id if platform else None
