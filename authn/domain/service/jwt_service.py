"""JWT token domain service."""

import logfire

from authn.config import AuthSettings
from authn.domain.value import PlatformId
from authn.util.jwt import create_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, email: str, platform_id: PlatformId | None
    ) -> str:
        """Create a session token for a user.

        Args:
            user_id: User ID
            email: User email
            platform_id: Platform the session is bound to

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, email, platform_id, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, platform_id=platform_id)
            return token
