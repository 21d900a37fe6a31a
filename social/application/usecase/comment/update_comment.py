"""Update comment use case."""

from pydantic import BaseModel

from social.application.usecase.base import requires_ownership
from social.domain.model import Comment, User
from social.domain.service import AuthorizationService, CommentService
from social.domain.value import RoleName, UserId

from .common import CommentResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    actor: User
    comment: Comment
    content: str

    @property
    def owner_id(self) -> UserId:
        return self.comment.author_id


class UpdateCommentUseCase:
    """Use case for editing a comment, allowed to its author and moderators."""

    def __init__(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> None:
        self.comment_service = comment_service
        self.authorization_service = authorization_service

    @requires_ownership(RoleName.MODERATOR)
    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Replace the comment's content.

        Raises:
            AuthorizationError: If the actor is neither author nor moderator
            NotFoundError: If the comment no longer exists
        """
        comment = await self.comment_service.update_comment(
            request.comment.id, request.content
        )
        return CommentResponse.from_comment(comment)
