"""PostgreSQL implementation of Platform repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from authn.domain.model import Platform
from authn.domain.repository import PlatformRepository
from authn.domain.value import PlatformId
from authn.persistence.mappers import platform_to_dict, row_to_platform
from authn.persistence.tables import platforms_table


class PostgresPlatformRepository(PlatformRepository):
    """Platforms table access within the request's session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, platform_id: PlatformId) -> Optional[Platform]:
        return await self._find_one(platforms_table.c.id == platform_id)

    async def find_by_custom_domain(self, domain: str) -> Optional[Platform]:
        """Find the platform serving a host name, ignoring case."""
        return await self._find_one(
            func.lower(platforms_table.c.custom_domain) == domain.lower()
        )

    async def save(self, platform: Platform) -> Platform:
        """Insert the platform, or overwrite every column if the ID exists."""
        values = platform_to_dict(platform)
        stmt = insert(platforms_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[platforms_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return platform

    async def _find_one(self, condition) -> Optional[Platform]:
        result = await self.session.execute(select(platforms_table).where(condition))
        row = result.mappings().first()
        return row_to_platform(dict(row)) if row else None
