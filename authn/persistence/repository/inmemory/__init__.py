"""In-memory repository implementations for testing."""

from .platform import InMemoryPlatformRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPlatformRepository",
    "InMemoryUserRepository",
]
