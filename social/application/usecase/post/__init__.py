"""Post use cases."""

from .common import PostResponse
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "PostResponse",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
