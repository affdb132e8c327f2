"""Mock persistence providers for testing."""

from dishka import Scope, provide

from authn.domain.repository import PlatformRepository, UserRepository
from authn.persistence.repository.inmemory import (
    InMemoryPlatformRepository,
    InMemoryUserRepository,
)
from authn.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_platform_repository(self) -> PlatformRepository:
        """Provide in-memory platform repository."""
        return InMemoryPlatformRepository()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()
