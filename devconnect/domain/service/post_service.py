"""Post domain service."""

from uuid import uuid4

import logfire

from devconnect.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from devconnect.domain.model import Comment, Like, Post
from devconnect.domain.repository import PostRepository
from devconnect.domain.value import LikeId, PostId, UserId, parse_uuid

from .base import Service


class PostService(Service):
    """Domain service for posts, likes and comments."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span("post_service.save_post", post_id=str(post.id)):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def list_posts(self) -> list[Post]:
        """List every post, most recent first."""
        with logfire.span("post_service.list_posts"):
            return await self.post_repository.find_all()

    async def get_post_by_id(self, post_id: str) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID as received from the client

        Returns:
            Post if found, None if missing or the ID is malformed
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            parsed = parse_uuid(post_id)
            if parsed is None:
                logfire.warn("Malformed post id", post_id=post_id)
                return None

            post = await self.post_repository.find_by_id(PostId(parsed))
            if not post:
                logfire.warn("Post not found", post_id=post_id)
            return post

    async def require_post(self, post_id: str) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist or the ID is malformed
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", post_id)
        return post

    async def delete_post(self, post_id: str, user_id: UserId) -> None:
        """Delete a post on behalf of its author.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user isn't the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=post_id, user_id=str(user_id)
        ):
            post = await self.require_post(post_id)
            if post.user_id != user_id:
                logfire.warn(
                    "Post delete by non-author", post_id=post_id, user_id=str(user_id)
                )
                raise NotAuthorizedError("post", post_id, str(user_id))

            await self.post_repository.delete(post.id)
            logfire.info("Post deleted", post_id=post_id)

    async def delete_by_author(self, user_id: UserId) -> int:
        """Delete every post written by a user.

        Returns:
            Number of posts deleted
        """
        with logfire.span("post_service.delete_by_author", user_id=str(user_id)):
            count = await self.post_repository.delete_by_author(user_id)
            logfire.info("Posts deleted for author", user_id=str(user_id), count=count)
            return count

    async def like(self, post_id: str, user_id: UserId) -> list[Like]:
        """Add the user's like to the front of the post's likes.

        Returns:
            Updated likes

        Raises:
            NotFoundError: If the post doesn't exist
            BusinessRuleViolationError: If the user already likes the post
        """
        with logfire.span("post_service.like", post_id=post_id, user_id=str(user_id)):
            post = await self.require_post(post_id)
            likes = post.like_entries()
            if user_id in likes:
                logfire.warn("Duplicate like", post_id=post_id, user_id=str(user_id))
                raise BusinessRuleViolationError("Post already liked")

            likes = likes.prepend(Like(id=LikeId(uuid4()), user_id=user_id))
            saved = await self.post_repository.save(
                post.model_copy(update={"likes": likes.to_list()})
            )
            logfire.info("Post liked", post_id=post_id, likes=len(saved.likes))
            return saved.likes

    async def unlike(self, post_id: str, user_id: UserId) -> list[Like]:
        """Remove the user's like from the post.

        Returns:
            Updated likes

        Raises:
            NotFoundError: If the post doesn't exist
            BusinessRuleViolationError: If the user hasn't liked the post
        """
        with logfire.span(
            "post_service.unlike", post_id=post_id, user_id=str(user_id)
        ):
            post = await self.require_post(post_id)
            likes = post.like_entries()
            if user_id not in likes:
                logfire.warn("Unlike without like", post_id=post_id, user_id=str(user_id))
                raise BusinessRuleViolationError("Post has not yet been liked")

            likes = likes.remove(user_id)
            saved = await self.post_repository.save(
                post.model_copy(update={"likes": likes.to_list()})
            )
            logfire.info("Post unliked", post_id=post_id, likes=len(saved.likes))
            return saved.likes

    async def add_comment(self, post_id: str, comment: Comment) -> list[Comment]:
        """Put a comment at the front of the post's comments.

        Returns:
            Updated comments

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "post_service.add_comment", post_id=post_id, comment_id=str(comment.id)
        ):
            post = await self.require_post(post_id)
            comments = post.comment_entries().prepend(comment)
            saved = await self.post_repository.save(
                post.model_copy(update={"comments": comments.to_list()})
            )
            logfire.info("Comment added", post_id=post_id, comment_id=str(comment.id))
            return saved.comments

    async def delete_comment(
        self, post_id: str, comment_id: str, user_id: UserId
    ) -> list[Comment]:
        """Remove a comment on behalf of its author.

        Returns:
            Updated comments

        Raises:
            NotFoundError: If the post or the comment doesn't exist
            NotAuthorizedError: If the user didn't write the comment
        """
        with logfire.span(
            "post_service.delete_comment",
            post_id=post_id,
            comment_id=comment_id,
            user_id=str(user_id),
        ):
            post = await self.require_post(post_id)
            comments = post.comment_entries()

            key = parse_uuid(comment_id)
            comment = comments.get(key)
            if comment is None:
                logfire.warn("Comment not found", post_id=post_id, comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)

            if comment.user_id != user_id:
                logfire.warn(
                    "Comment delete by non-author",
                    comment_id=comment_id,
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", comment_id, str(user_id))

            comments = comments.remove(key)
            saved = await self.post_repository.save(
                post.model_copy(update={"comments": comments.to_list()})
            )
            logfire.info("Comment deleted", post_id=post_id, comment_id=comment_id)
            return saved.comments
