"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .profile import InMemoryProfileRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryProfileRepository",
    "InMemoryUserRepository",
]
