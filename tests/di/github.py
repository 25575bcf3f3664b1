"""Mock GitHub providers for testing."""

from dishka import Scope, provide

from devconnect.adapter.github import GithubClient, MockGithubClient
from devconnect.util.di.infrastructure.github import GithubProvider


class MockGithubProvider(GithubProvider):
    """Mock GitHub provider with canned repositories."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_github_client(self) -> GithubClient:
        return MockGithubClient()
