"""PostgreSQL repository implementations."""

from .post import PostgresPostRepository
from .profile import PostgresProfileRepository
from .user import PostgresUserRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresProfileRepository",
    "PostgresUserRepository",
]
