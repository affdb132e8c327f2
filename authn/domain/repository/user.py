"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from authn.domain.model import User
from authn.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_all_by_email(self, email: str) -> list[User]:
        """Find every account registered under an email.

        Emails are compared case-insensitively. The same person may hold
        one account per platform.

        Args:
            email: Email address

        Returns:
            Matching users, oldest first (may be empty)
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
