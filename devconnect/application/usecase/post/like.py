"""Like and unlike use cases."""

from pydantic import BaseModel

from devconnect.application.usecase.common import CallerContext
from devconnect.domain.service import PostService

from .response import LikeResponse


class LikeRequest(BaseModel):
    """Like or unlike request."""

    caller: CallerContext
    post_id: str


class LikesResponse(BaseModel):
    """A post's likes after the change."""

    likes: list[LikeResponse]


class LikePostUseCase:
    """Use case for liking a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize like post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: LikeRequest) -> LikesResponse:
        """Add the caller's like.

        Raises:
            NotFoundError: If the post doesn't exist
            BusinessRuleViolationError: If the caller already likes the post
        """
        likes = await self.post_service.like(request.post_id, request.caller.user_id)
        return LikesResponse(likes=[LikeResponse.from_domain(like) for like in likes])


class UnlikePostUseCase:
    """Use case for taking back a like."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: LikeRequest) -> LikesResponse:
        """Remove the caller's like.

        Raises:
            NotFoundError: If the post doesn't exist
            BusinessRuleViolationError: If the caller hasn't liked the post
        """
        likes = await self.post_service.unlike(request.post_id, request.caller.user_id)
        return LikesResponse(likes=[LikeResponse.from_domain(like) for like in likes])
