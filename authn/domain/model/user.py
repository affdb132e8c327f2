"""User entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from authn.domain.model.common import DomainModel
from authn.domain.value import PlatformId, UserId, UserIdentityProvider


class User(DomainModel):
    """A user account, unique per (email, platform)."""

    id: UserId
    email: str
    first_name: str
    last_name: str
    platform_id: Optional[PlatformId] = None
    provider: UserIdentityProvider
    verified: bool = False
    track_events: bool = False
    news_letter: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    last_login_at: Optional[datetime] = None
