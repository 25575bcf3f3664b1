"""Post use cases."""

from .comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentsResponse,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase, ListPostsResponse, ListPostsUseCase
from .like import LikePostUseCase, LikeRequest, LikesResponse, UnlikePostUseCase
from .response import CommentResponse, LikeResponse, PostResponse

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentResponse",
    "CommentsResponse",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "LikePostUseCase",
    "LikeRequest",
    "LikeResponse",
    "LikesResponse",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostResponse",
    "UnlikePostUseCase",
]
