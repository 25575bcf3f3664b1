"""Strongly typed identifiers for devconnect domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Documents
UserId = NewType("UserId", UUID)
ProfileId = NewType("ProfileId", UUID)
PostId = NewType("PostId", UUID)

# Embedded list entries
ExperienceId = NewType("ExperienceId", UUID)
EducationId = NewType("EducationId", UUID)
LikeId = NewType("LikeId", UUID)
CommentId = NewType("CommentId", UUID)


def parse_uuid(raw: str) -> UUID | None:
    """Parse an identifier taken from a URL path.

    Returns:
        The UUID, or None if the string is not a well-formed identifier
    """
    try:
        return UUID(raw)
    except (ValueError, TypeError, AttributeError):
        return None
