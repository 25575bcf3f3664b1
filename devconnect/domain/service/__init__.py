"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .post_service import PostService
from .profile_service import ProfileService
from .user_service import UserService

__all__ = [
    "JWTService",
    "PostService",
    "ProfileService",
    "Service",
    "UserService",
]
