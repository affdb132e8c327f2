"""Test configuration and fixtures."""

import pytest

from authn.config import AuthSettings, GoogleOAuthSettings, Settings


@pytest.fixture
def settings() -> Settings:
    """Test settings with a process-wide Google client configured."""
    return Settings(
        environment="test",
        auth=AuthSettings(
            jwt_secret="test-secret",
            google=GoogleOAuthSettings(
                client_id="global-client", client_secret="global-secret"
            ),
        ),
    )
