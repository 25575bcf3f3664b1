"""Create post use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel

from devconnect.application.usecase.common import CallerContext
from devconnect.domain.model import Post
from devconnect.domain.service import PostService, UserService
from devconnect.domain.value import PostId

from .response import PostResponse


class CreatePostRequest(BaseModel):
    """Create post request."""

    caller: CallerContext
    text: str


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Steps:
        1. Load the author to snapshot name and avatar
        2. Create and save the post

        Args:
            request: Create post request

        Returns:
            The new post

        Raises:
            NotFoundError: If the author's account no longer exists
        """
        user = await self.user_service.get_by_id(request.caller.user_id)

        with logfire.span("create_post.execute", user_id=str(user.id)):
            post = Post(
                id=PostId(uuid4()),
                user_id=user.id,
                text=request.text,
                name=user.name,
                avatar=user.avatar,
                created_at=datetime.now(),
            )
            saved_post = await self.post_service.save_post(post)
            return PostResponse.from_domain(saved_post)
