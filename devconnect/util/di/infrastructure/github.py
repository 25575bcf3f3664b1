"""GitHub infrastructure providers."""

from dishka import Scope, provide

from devconnect.adapter.github import GithubClient, RealGithubClient
from devconnect.config import GithubSettings
from devconnect.util.di.base import ProviderBase


class GithubProvider(ProviderBase):
    """GitHub component base."""

    __mock_component__ = "github"


class ProdGithubProvider(GithubProvider):
    """Production GitHub provider calling the public REST API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_github_client(self, settings: GithubSettings) -> GithubClient:
        return RealGithubClient(settings=settings)
