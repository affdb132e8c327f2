"""Platform repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from authn.domain.model import Platform
from authn.domain.value import PlatformId


class PlatformRepository(ABC):
    """Repository for Platform entity."""

    @abstractmethod
    async def find_by_id(self, platform_id: PlatformId) -> Optional[Platform]:
        """Find a platform by ID.

        Args:
            platform_id: The platform's identifier

        Returns:
            The platform if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_custom_domain(self, domain: str) -> Optional[Platform]:
        """Find the platform serving a custom domain.

        Args:
            domain: Host name without scheme or port

        Returns:
            The platform if one claims the domain, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, platform: Platform) -> Platform:
        """Save a platform (create or update).

        Args:
            platform: The platform to save

        Returns:
            The saved platform
        """
        pass
