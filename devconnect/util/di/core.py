"""Configuration providers."""

from dishka import Scope, provide

from devconnect.config import AuthSettings, GithubSettings, Settings
from devconnect.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read from the environment and ``.env``."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_github_settings(self, settings: Settings) -> GithubSettings:
        return settings.github
