"""Comment use cases."""

from .common import CommentResponse
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
