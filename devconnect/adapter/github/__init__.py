"""GitHub adapter."""

from .client import GithubClient, GithubError, MockGithubClient, RealGithubClient

__all__ = [
    "GithubClient",
    "GithubError",
    "MockGithubClient",
    "RealGithubClient",
]
