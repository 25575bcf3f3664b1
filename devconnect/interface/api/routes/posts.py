"""Post routes."""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, BeforeValidator, Field

from devconnect.application.usecase.common import CallerContext, MessageResponse
from devconnect.application.usecase.post import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentResponse,
    CreatePostRequest,
    CreatePostUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikePostUseCase,
    LikeRequest,
    LikeResponse,
    ListPostsUseCase,
    PostResponse,
    UnlikePostUseCase,
)
from devconnect.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from devconnect.interface.api.auth import require_caller
from devconnect.interface.api.validation import required

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


def _not_found(e: NotFoundError) -> HTTPException:
    logfire.warn(f"{e.resource} not found", error=str(e))
    detail = "Comment does not exist" if e.resource == "Comment" else "Post not found"
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def _not_authorized(e: NotAuthorizedError) -> HTTPException:
    logfire.warn("Unauthorized post modification attempt", error=str(e))
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="User is not authorized",
    )


def _server_error(action: str, e: Exception) -> HTTPException:
    logfire.error(f"Unexpected error {action}", error=str(e))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Server error",
    )


class TextAPIRequest(BaseModel):
    """API request carrying the text of a post or comment."""

    text: Annotated[str, BeforeValidator(required("Text is required"))] = Field(
        default=None, validate_default=True
    )


@router.post("", response_model=PostResponse)
async def create_post(
    request: TextAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    caller: CallerContext = Depends(require_caller),
) -> PostResponse:
    """Create a post as the caller."""
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(caller=caller, text=request.text)
        )
    except NotFoundError as e:
        logfire.warn("Post author not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    except Exception as e:
        raise _server_error("creating post", e)


@router.get("", response_model=list[PostResponse])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    caller: CallerContext = Depends(require_caller),
) -> list[PostResponse]:
    """List all posts, newest first."""
    try:
        result = await list_posts_use_case.execute()
        return result.posts
    except Exception as e:
        raise _server_error("listing posts", e)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    caller: CallerContext = Depends(require_caller),
) -> PostResponse:
    """Get a post by ID."""
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        raise _server_error("loading post", e)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    caller: CallerContext = Depends(require_caller),
) -> MessageResponse:
    """Delete one of the caller's posts."""
    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(caller=caller, post_id=post_id)
        )
    except NotFoundError as e:
        raise _not_found(e)
    except NotAuthorizedError as e:
        raise _not_authorized(e)
    except Exception as e:
        raise _server_error("deleting post", e)


@router.put("/like/{post_id}", response_model=list[LikeResponse])
async def like_post(
    post_id: str,
    like_post_use_case: FromDishka[LikePostUseCase],
    caller: CallerContext = Depends(require_caller),
) -> list[LikeResponse]:
    """Like a post.

    Returns:
        The post's likes, the caller's first
    """
    try:
        result = await like_post_use_case.execute(
            LikeRequest(caller=caller, post_id=post_id)
        )
        return result.likes
    except NotFoundError as e:
        raise _not_found(e)
    except BusinessRuleViolationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise _server_error("liking post", e)


@router.put("/unlike/{post_id}", response_model=list[LikeResponse])
async def unlike_post(
    post_id: str,
    unlike_post_use_case: FromDishka[UnlikePostUseCase],
    caller: CallerContext = Depends(require_caller),
) -> list[LikeResponse]:
    """Take back the caller's like."""
    try:
        result = await unlike_post_use_case.execute(
            LikeRequest(caller=caller, post_id=post_id)
        )
        return result.likes
    except NotFoundError as e:
        raise _not_found(e)
    except BusinessRuleViolationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise _server_error("unliking post", e)


@router.post("/comment/{post_id}", response_model=list[CommentResponse])
async def add_comment(
    post_id: str,
    request: TextAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    caller: CallerContext = Depends(require_caller),
) -> list[CommentResponse]:
    """Comment on a post.

    Returns:
        The post's comments, the new one first
    """
    try:
        result = await add_comment_use_case.execute(
            AddCommentRequest(caller=caller, post_id=post_id, text=request.text)
        )
        return result.comments
    except NotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        raise _server_error("adding comment", e)


@router.delete("/comment/{post_id}/{comment_id}", response_model=list[CommentResponse])
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    caller: CallerContext = Depends(require_caller),
) -> list[CommentResponse]:
    """Delete one of the caller's comments."""
    try:
        result = await delete_comment_use_case.execute(
            DeleteCommentRequest(caller=caller, post_id=post_id, comment_id=comment_id)
        )
        return result.comments
    except NotFoundError as e:
        raise _not_found(e)
    except NotAuthorizedError as e:
        raise _not_authorized(e)
    except Exception as e:
        raise _server_error("deleting comment", e)
