"""Comment use cases."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel

from devconnect.application.usecase.common import CallerContext
from devconnect.domain.model import Comment
from devconnect.domain.service import PostService, UserService
from devconnect.domain.value import CommentId

from .response import CommentResponse


class AddCommentRequest(BaseModel):
    """Add comment request."""

    caller: CallerContext
    post_id: str
    text: str


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    caller: CallerContext
    post_id: str
    comment_id: str


class CommentsResponse(BaseModel):
    """A post's comments after the change."""

    comments: list[CommentResponse]


class AddCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize add comment use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> CommentsResponse:
        """Execute add comment flow.

        Steps:
        1. Load the caller to snapshot name and avatar
        2. Put the comment at the front of the post's comments

        Raises:
            NotFoundError: If the post or the caller's account doesn't exist
        """
        user = await self.user_service.get_by_id(request.caller.user_id)

        with logfire.span(
            "add_comment.execute", post_id=request.post_id, user_id=str(user.id)
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                user_id=user.id,
                text=request.text,
                name=user.name,
                avatar=user.avatar,
                created_at=datetime.now(),
            )
            comments = await self.post_service.add_comment(request.post_id, comment)
            return CommentsResponse(
                comments=[CommentResponse.from_domain(c) for c in comments]
            )


class DeleteCommentUseCase:
    """Use case for an author deleting their comment."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeleteCommentRequest) -> CommentsResponse:
        """Remove exactly the comment with the given id.

        Raises:
            NotFoundError: If the post or the comment doesn't exist
            NotAuthorizedError: If the caller didn't write the comment
        """
        comments = await self.post_service.delete_comment(
            request.post_id, request.comment_id, request.caller.user_id
        )
        return CommentsResponse(
            comments=[CommentResponse.from_domain(c) for c in comments]
        )
