"""Platform domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from authn.domain.error import NotFoundError
from authn.domain.model import Platform
from authn.domain.repository import PlatformRepository
from authn.domain.value import PlatformId, UserId

from .base import Service


class PlatformService(Service):
    """Domain service for platform (tenant) lookups and creation."""

    def __init__(self, platform_repository: PlatformRepository) -> None:
        """Initialize platform service.

        Args:
            platform_repository: Platform repository
        """
        self.platform_repository = platform_repository

    async def get_one(self, platform_id: PlatformId) -> Platform | None:
        """Get a platform by ID, or None if it does not exist."""
        return await self.platform_repository.find_by_id(platform_id)

    async def get_one_or_throw(self, platform_id: PlatformId) -> Platform:
        """Get a platform by ID.

        Args:
            platform_id: Platform ID

        Returns:
            Platform entity

        Raises:
            NotFoundError: If platform not found
        """
        with logfire.span("platform_service.get_one_or_throw", platform_id=platform_id):
            platform = await self.platform_repository.find_by_id(platform_id)
            if not platform:
                logfire.warn("Platform not found", platform_id=platform_id)
                raise NotFoundError("Platform", platform_id)
            return platform

    async def get_one_by_custom_domain(self, domain: str) -> Platform | None:
        """Get the platform that serves a custom domain.

        Args:
            domain: Request host name, without scheme or port

        Returns:
            Platform if one is bound to the domain, None otherwise
        """
        return await self.platform_repository.find_by_custom_domain(domain)

    async def create(self, owner_id: UserId, name: str) -> Platform:
        """Create a new platform owned by a user.

        Args:
            owner_id: User who owns the platform
            name: Display name

        Returns:
            The created platform
        """
        now = datetime.now(timezone.utc)
        platform = Platform(
            id=PlatformId(uuid4().hex),
            name=name,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        saved = await self.platform_repository.save(platform)
        logfire.info(
            "Platform created", platform_id=saved.id, owner_id=str(owner_id)
        )
        return saved
