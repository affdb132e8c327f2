"""Resolves user-facing URLs for a platform."""

from authn.config import Settings
from authn.domain.value import PlatformId

from .base import Service
from .platform_service import PlatformService


class DomainHelper(Service):
    """Builds frontend URLs, honoring a platform's custom domain."""

    def __init__(self, platform_service: PlatformService, settings: Settings) -> None:
        self.platform_service = platform_service
        self.settings = settings

    async def get_internal_url(self, path: str, platform_id: PlatformId | None) -> str:
        """Build a frontend URL for a path.

        Platforms with a custom domain get URLs on that domain; everyone
        else gets the default frontend URL.

        Args:
            path: URL path, with or without leading slash
            platform_id: Platform to scope the URL to, if any

        Returns:
            Absolute URL
        """
        base_url = await self._get_base_url(platform_id)
        return f"{base_url.rstrip('/')}/{path.lstrip('/')}"

    async def _get_base_url(self, platform_id: PlatformId | None) -> str:
        if platform_id is not None:
            platform = await self.platform_service.get_one(platform_id)
            if platform and platform.custom_domain:
                return f"{self.settings.api.protocol}://{platform.custom_domain}"
        return self.settings.api.frontend_url
