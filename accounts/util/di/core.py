"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from accounts.config import AuthSettings, MailSettings, Settings
from accounts.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_mail_settings(self, settings: Settings) -> MailSettings:
        return settings.mail
