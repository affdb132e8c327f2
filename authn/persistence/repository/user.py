"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from authn.domain.model import User
from authn.domain.repository import UserRepository
from authn.domain.value import UserId
from authn.persistence.mappers import row_to_user, user_to_dict
from authn.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Users table access within the request's session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        result = await self.session.execute(
            select(users_table).where(users_table.c.id == user_id)
        )
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_all_by_email(self, email: str) -> list[User]:
        """Every account registered under an email, oldest first.

        Emails are stored lowercased, so only the argument is normalized
        and ``idx_users_email`` stays usable.
        """
        stmt = (
            select(users_table)
            .where(users_table.c.email == email.lower())
            .order_by(users_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def save(self, user: User) -> User:
        """Insert the user, or overwrite every column if the ID exists."""
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
