"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from authn.domain.repository.platform import PlatformRepository
from authn.domain.repository.user import UserRepository

__all__ = [
    "PlatformRepository",
    "UserRepository",
]
