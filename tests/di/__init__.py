"""Mock providers for testing."""

from .github import MockGithubProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockGithubProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
