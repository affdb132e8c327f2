"""PostgreSQL repository implementations."""

from authn.persistence.repository.platform import PostgresPlatformRepository
from authn.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresPlatformRepository",
    "PostgresUserRepository",
]
