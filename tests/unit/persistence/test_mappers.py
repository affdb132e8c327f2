"""Unit tests for row <-> domain model mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from authn.domain.value import ClientCredentials, UserIdentityProvider
from authn.persistence.mappers import (
    platform_to_dict,
    row_to_platform,
    row_to_user,
    user_to_dict,
)
from tests.factories import make_platform, make_user


class TestPlatformMapping:
    """Tests for platform mapping."""

    def test_stored_google_client_is_restored(self):
        """Credentials round-trip through the JSONB column."""
        platform = make_platform(
            "p1",
            custom_domain="flows.acme.com",
            google=ClientCredentials(client_id="acme-client", client_secret="s3cret"),
        )

        row = platform_to_dict(platform)

        assert row["federated_auth_providers"] == {
            "google": {"client_id": "acme-client", "client_secret": "s3cret"}
        }
        assert row_to_platform(row) == platform

    def test_empty_providers_column(self):
        now = datetime.now(timezone.utc)
        platform = row_to_platform(
            {
                "id": "p1",
                "name": "Acme",
                "owner_id": str(uuid4()),
                "custom_domain": None,
                "federated_auth_providers": None,
                "created_at": now,
                "updated_at": now,
            }
        )

        assert platform.federated_auth_providers.google is None

    def test_providers_without_adapter_are_ignored(self):
        """A stored saml entry must not stop the platform from loading."""
        now = datetime.now(timezone.utc)
        platform = row_to_platform(
            {
                "id": "p1",
                "name": "Acme",
                "owner_id": str(uuid4()),
                "custom_domain": None,
                "federated_auth_providers": {
                    "google": {"client_id": "acme-client", "client_secret": "s"},
                    "saml": {"entity_id": "https://idp.acme.com", "cert": "MII..."},
                },
                "created_at": now,
                "updated_at": now,
            }
        )

        google = platform.federated_auth_providers.google
        assert google == ClientCredentials(client_id="acme-client", client_secret="s")


class TestUserMapping:
    """Tests for user mapping."""

    def test_provider_is_stored_as_string(self):
        user = make_user(platform_id="p1")

        row = user_to_dict(user)

        assert row["provider"] == "google"
        restored = row_to_user(row)
        assert restored.provider == UserIdentityProvider.GOOGLE
        assert restored == user
