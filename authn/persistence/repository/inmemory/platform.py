"""In-memory platform repository for testing."""

from typing import Optional

from authn.domain.model import Platform
from authn.domain.repository.platform import PlatformRepository
from authn.domain.value import PlatformId


class InMemoryPlatformRepository(PlatformRepository):
    """In-memory implementation of PlatformRepository for testing."""

    def __init__(self) -> None:
        self._platforms: dict[PlatformId, Platform] = {}

    async def find_by_id(self, platform_id: PlatformId) -> Optional[Platform]:
        """Find platform by ID."""
        return self._platforms.get(platform_id)

    async def find_by_custom_domain(self, domain: str) -> Optional[Platform]:
        """Find platform by custom domain."""
        for platform in self._platforms.values():
            if platform.custom_domain and platform.custom_domain.lower() == domain.lower():
                return platform
        return None

    async def save(self, platform: Platform) -> Platform:
        """Save or update a platform."""
        self._platforms[platform.id] = platform
        return platform
