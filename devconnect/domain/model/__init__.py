"""Domain model entities for devconnect."""

from devconnect.domain.model.keyed_list import KeyedList, MissingKeyPolicy
from devconnect.domain.model.post import Comment, Like, Post
from devconnect.domain.model.profile import Education, Experience, Profile
from devconnect.domain.model.user import User

__all__ = [
    "User",
    "Profile",
    "Experience",
    "Education",
    "Post",
    "Like",
    "Comment",
    "KeyedList",
    "MissingKeyPolicy",
]
