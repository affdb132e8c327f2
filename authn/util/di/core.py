"""Configuration providers."""

from dishka import Scope, provide

from authn.config import AuthSettings, Settings
from authn.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings, loaded once per application from the environment."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Auth group on its own, for services that need only credentials."""
        return settings.auth
