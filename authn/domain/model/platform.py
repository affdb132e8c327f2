"""Platform entity.

A platform is a tenant. It may serve the app from its own custom domain and
may bring its own OAuth clients instead of the process-wide ones.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from authn.domain.model.common import DomainModel
from authn.domain.value import FederatedAuthProviders, PlatformId, UserId


class Platform(DomainModel):
    """Tenant that users sign in to."""

    id: PlatformId
    name: str
    owner_id: Optional[UserId] = None
    custom_domain: Optional[str] = None  # e.g. "flows.acme.com", no scheme
    federated_auth_providers: FederatedAuthProviders = Field(
        default_factory=FederatedAuthProviders
    )
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
