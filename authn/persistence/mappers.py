"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from authn.domain.model import Platform, User
from authn.domain.value import (
    FederatedAuthProviders,
    PlatformId,
    UserId,
    UserIdentityProvider,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_platform(row: Dict[str, Any]) -> Platform:
    """Convert database row to Platform domain model.

    Args:
        row: Database row as dict

    Returns:
        Platform domain model
    """
    owner_id = row.get("owner_id")
    return Platform(
        id=PlatformId(row["id"]),
        name=row["name"],
        owner_id=UserId(_as_uuid(owner_id)) if owner_id else None,
        custom_domain=row.get("custom_domain"),
        federated_auth_providers=FederatedAuthProviders.model_validate(
            row.get("federated_auth_providers") or {}
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def platform_to_dict(platform: Platform) -> Dict[str, Any]:
    """Convert Platform domain model to database dict.

    Args:
        platform: Platform domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return platform.model_dump()


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    platform_id = row.get("platform_id")
    return User(
        id=UserId(_as_uuid(row["id"])),
        email=row["email"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        platform_id=PlatformId(platform_id) if platform_id else None,
        provider=UserIdentityProvider(row["provider"]),
        verified=row["verified"],
        track_events=row["track_events"],
        news_letter=row["news_letter"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        last_login_at=row.get("last_login_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["provider"] = user.provider.value
    return data
