"""Configuration providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, DatabaseSettings, Settings
from blog.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Settings and the sections services depend on.

    Settings are read once per container from the environment and ``.env``.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Token signing and password policy."""
        return settings.auth

    @provide
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        """Connection string and pool sizing."""
        return settings.database
