"""Post read use cases."""

from pydantic import BaseModel

from devconnect.domain.service import PostService

from .response import PostResponse


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # Raw path parameter


class ListPostsResponse(BaseModel):
    """Posts, newest first."""

    posts: list[PostResponse]


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Load a post.

        Raises:
            NotFoundError: If the post doesn't exist or the ID is malformed
        """
        post = await self.post_service.require_post(request.post_id)
        return PostResponse.from_domain(post)


class ListPostsUseCase:
    """Use case for listing the feed."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self) -> ListPostsResponse:
        posts = await self.post_service.list_posts()
        return ListPostsResponse(posts=[PostResponse.from_domain(p) for p in posts])
