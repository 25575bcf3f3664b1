"""GitHub repository listing client.

Profiles can show the latest public repositories of their GitHub account.
"""

from abc import ABC, abstractmethod
from typing import Any

import httpx

from devconnect.adapter.error import ProviderError
from devconnect.config import GithubSettings
from devconnect.util.logging import get_logger

logger = get_logger(__name__)


class GithubError(ProviderError):
    """Raised when GitHub can't list a user's repositories."""

    provider = "github"


class GithubClient(ABC):
    """Lists public repositories of a GitHub user."""

    @abstractmethod
    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        """List a user's repositories.

        Args:
            username: GitHub username

        Returns:
            Repository objects as returned by the GitHub API

        Raises:
            GithubError: If the user doesn't exist or GitHub can't be reached
        """
        pass


class RealGithubClient(GithubClient):
    """GitHub REST API client."""

    def __init__(self, settings: GithubSettings) -> None:
        """Initialize GitHub client.

        Args:
            settings: GitHub settings (API URL, OAuth app credentials, timeout)
        """
        self.settings = settings

    def _build_params(self) -> dict[str, str | int]:
        params: dict[str, str | int] = {
            "per_page": self.settings.repo_count,
            "sort": "created:asc",
        }
        if self.settings.client_id and self.settings.client_secret:
            params["client_id"] = self.settings.client_id
            params["client_secret"] = self.settings.client_secret
        return params

    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        url = f"{self.settings.api_url}/users/{username}/repos"

        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout_seconds) as client:
                response = await client.get(
                    url,
                    params=self._build_params(),
                    headers={
                        "Accept": "application/vnd.github+json",
                        "User-Agent": "devconnect",
                    },
                )
        except httpx.HTTPError as e:
            logger.error(f"GitHub request failed for {username}: {e}")
            raise GithubError(f"GitHub request failed: {e}") from e

        if response.status_code != 200:
            logger.warning(
                f"GitHub returned {response.status_code} for user {username}"
            )
            raise GithubError(
                f"No GitHub profile found for {username}",
                status_code=response.status_code,
            )

        repositories = response.json()
        logger.info(f"Fetched {len(repositories)} repositories for {username}")
        return repositories


class MockGithubClient(GithubClient):
    """Mock GitHub client for testing.

    Knows a fixed set of users and returns deterministic repositories without
    making real API calls.
    """

    def __init__(self, repositories: dict[str, list[dict[str, Any]]] | None = None):
        """Initialize mock client.

        Args:
            repositories: Repositories per username (defaults to one known user)
        """
        if repositories is None:
            repositories = {
                "octocat": [
                    {
                        "id": 1296269,
                        "name": "Hello-World",
                        "html_url": "https://github.com/octocat/Hello-World",
                        "description": "My first repository on GitHub!",
                        "stargazers_count": 80,
                        "watchers_count": 80,
                        "forks_count": 9,
                    }
                ]
            }
        self.repositories = repositories

    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        if username not in self.repositories:
            raise GithubError(f"No GitHub profile found for {username}")
        return self.repositories[username]
