"""Delete post use case."""

from pydantic import BaseModel

from devconnect.application.usecase.common import CallerContext, MessageResponse
from devconnect.domain.service import PostService


class DeletePostRequest(BaseModel):
    """Delete post request."""

    caller: CallerContext
    post_id: str


class DeletePostUseCase:
    """Use case for an author deleting their post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> MessageResponse:
        """Delete the post.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller isn't the author
        """
        await self.post_service.delete_post(request.post_id, request.caller.user_id)
        return MessageResponse(msg="Post removed")
