"""Repository interfaces for devconnect domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from devconnect.domain.repository.post import PostRepository
from devconnect.domain.repository.profile import ProfileRepository
from devconnect.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ProfileRepository",
    "PostRepository",
]
