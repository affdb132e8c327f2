"""Builders for domain objects used across tests."""

from datetime import datetime, timezone
from uuid import uuid4

from authn.domain.model import Platform, User
from authn.domain.value import (
    ClientCredentials,
    FederatedAuthProviders,
    PlatformId,
    UserId,
    UserIdentityProvider,
)


def make_platform(
    platform_id: str = "p1",
    owner_id: UserId | None = None,
    custom_domain: str | None = None,
    google: ClientCredentials | None = None,
) -> Platform:
    """Build a platform, optionally with its own Google client."""
    return Platform(
        id=PlatformId(platform_id),
        name=f"Platform {platform_id}",
        owner_id=owner_id,
        custom_domain=custom_domain,
        federated_auth_providers=FederatedAuthProviders(google=google),
    )


def make_user(
    email: str = "ada@example.com",
    platform_id: str | None = None,
    created_at: datetime | None = None,
) -> User:
    """Build a verified Google user."""
    return User(
        id=UserId(uuid4()),
        email=email,
        first_name="Ada",
        last_name="Lovelace",
        platform_id=PlatformId(platform_id) if platform_id else None,
        provider=UserIdentityProvider.GOOGLE,
        verified=True,
        created_at=created_at or datetime.now(timezone.utc),
    )
