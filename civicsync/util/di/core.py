"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from civicsync.config import (
    AnalyticsSettings,
    AuthSettings,
    PaginationSettings,
    Settings,
    UploadSettings,
)
from civicsync.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_upload_settings(self, settings: Settings) -> UploadSettings:
        return settings.uploads

    @provide(scope=Scope.APP)
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        return settings.pagination

    @provide(scope=Scope.APP)
    def provide_analytics_settings(self, settings: Settings) -> AnalyticsSettings:
        return settings.analytics
