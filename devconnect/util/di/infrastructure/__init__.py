"""Infrastructure providers."""

# Import bases
from .github import GithubProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .github import ProdGithubProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "GithubProvider",
    "PersistenceProvider",
    "ProdGithubProvider",
    "ProdPersistenceProvider",
]
