"""Domain model entities."""

from authn.domain.model.platform import Platform
from authn.domain.model.user import User

__all__ = [
    "Platform",
    "User",
]
