"""Post aggregate root.

A post embeds its likes (one per user) and its comments. Author name and
avatar are snapshots taken when the post or comment is created.
"""

from datetime import datetime
from operator import attrgetter

from pydantic import Field

from devconnect.domain.model.common import DomainModel
from devconnect.domain.model.keyed_list import KeyedList
from devconnect.domain.value import CommentId, LikeId, PostId, UserId


class Like(DomainModel):
    """A user's like on a post."""

    id: LikeId
    user_id: UserId


class Comment(DomainModel):
    """Comment on a post."""

    id: CommentId
    user_id: UserId
    text: str = Field(min_length=1)
    name: str | None = None
    avatar: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)


class Post(DomainModel):
    """Feed post."""

    id: PostId
    user_id: UserId
    text: str = Field(min_length=1)
    name: str | None = None
    avatar: str | None = None
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    def like_entries(self) -> KeyedList[Like]:
        """Likes keyed by the liking user (one like per user)."""
        return KeyedList(self.likes, key=attrgetter("user_id"))

    def comment_entries(self) -> KeyedList[Comment]:
        """Comments keyed by comment id."""
        return KeyedList(self.comments)
