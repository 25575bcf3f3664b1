"""GitHub repositories use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from devconnect.adapter.github import GithubClient


class ListGithubReposRequest(BaseModel):
    """List a GitHub user's latest repositories."""

    username: str


class ListGithubReposUseCase:
    """Use case for showing a profile's GitHub repositories."""

    def __init__(self, github_client: GithubClient) -> None:
        """Initialize list GitHub repos use case.

        Args:
            github_client: GitHub adapter
        """
        self.github_client = github_client

    async def execute(self, request: ListGithubReposRequest) -> list[dict[str, Any]]:
        """Fetch repositories as GitHub returns them.

        Raises:
            GithubError: If the account doesn't exist or GitHub can't be reached
        """
        with logfire.span("list_github_repos.execute", username=request.username):
            return await self.github_client.list_repositories(request.username)
