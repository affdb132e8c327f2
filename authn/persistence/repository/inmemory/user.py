"""In-memory user repository for testing."""

from typing import Optional

from authn.domain.model import User
from authn.domain.repository.user import UserRepository
from authn.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_all_by_email(self, email: str) -> list[User]:
        """Find all users with the given email."""
        matches = [u for u in self._users.values() if u.email.lower() == email.lower()]
        matches.sort(key=lambda u: u.created_at)
        return matches

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
