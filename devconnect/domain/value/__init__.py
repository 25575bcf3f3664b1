"""Domain value objects for devconnect."""

from devconnect.domain.value.identifiers import (
    CommentId,
    EducationId,
    ExperienceId,
    LikeId,
    PostId,
    ProfileId,
    UserId,
    parse_uuid,
)
from devconnect.domain.value.types import ProfileFields, SocialLinks, SocialNetwork

__all__ = [
    # Identifiers
    "UserId",
    "ProfileId",
    "PostId",
    "ExperienceId",
    "EducationId",
    "LikeId",
    "CommentId",
    "parse_uuid",
    # Types
    "ProfileFields",
    "SocialLinks",
    "SocialNetwork",
]
