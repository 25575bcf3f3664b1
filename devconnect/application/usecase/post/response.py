"""Post response models."""

from datetime import datetime

from pydantic import BaseModel

from devconnect.domain.model import Comment, Like, Post


class LikeResponse(BaseModel):
    """A like: entry id and the liking user's id."""

    id: str
    user: str

    @classmethod
    def from_domain(cls, like: Like) -> "LikeResponse":
        return cls(id=str(like.id), user=str(like.user_id))


class CommentResponse(BaseModel):
    """Comment with its author snapshot."""

    id: str
    user: str
    text: str
    name: str | None
    avatar: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=str(comment.id),
            user=str(comment.user_id),
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            created_at=comment.created_at,
        )


class PostResponse(BaseModel):
    """Post document."""

    id: str
    user: str
    text: str
    name: str | None
    avatar: str | None
    likes: list[LikeResponse]
    comments: list[CommentResponse]
    created_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        return cls(
            id=str(post.id),
            user=str(post.user_id),
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            likes=[LikeResponse.from_domain(like) for like in post.likes],
            comments=[CommentResponse.from_domain(c) for c in post.comments],
            created_at=post.created_at,
        )
