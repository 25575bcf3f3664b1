"""Delete account use case."""

import logfire
from pydantic import BaseModel

from devconnect.application.usecase.common import CallerContext, MessageResponse
from devconnect.domain.service import PostService, ProfileService, UserService


class DeleteAccountRequest(BaseModel):
    """Delete the caller's account."""

    caller: CallerContext


class DeleteAccountUseCase:
    """Use case for deleting a user together with their profile and posts."""

    def __init__(
        self,
        post_service: PostService,
        profile_service: ProfileService,
        user_service: UserService,
    ) -> None:
        """Initialize delete account use case.

        Args:
            post_service: Post domain service
            profile_service: Profile domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: DeleteAccountRequest) -> MessageResponse:
        """Execute delete cascade.

        Steps:
        1. Delete the caller's posts
        2. Delete the caller's profile
        3. Delete the user

        The steps run on the request's session and are committed together.
        Comments and likes the user left on other posts are kept.
        """
        user_id = request.caller.user_id

        with logfire.span("delete_account.execute", user_id=str(user_id)):
            posts = await self.post_service.delete_by_author(user_id)
            had_profile = await self.profile_service.delete_for_user(user_id)
            await self.user_service.delete(user_id)

            logfire.info(
                "Account deleted",
                user_id=str(user_id),
                posts=posts,
                had_profile=had_profile,
            )
            return MessageResponse(msg="User deleted")
