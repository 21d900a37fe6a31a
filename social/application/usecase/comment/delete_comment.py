"""Delete comment use case."""

from pydantic import BaseModel

from social.application.usecase.base import requires_ownership
from social.domain.model import Comment, User
from social.domain.service import AuthorizationService, CommentService
from social.domain.value import RoleName, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    actor: User
    comment: Comment

    @property
    def owner_id(self) -> UserId:
        return self.comment.author_id


class DeleteCommentUseCase:
    """Use case for deleting a comment, allowed to its author and admins."""

    def __init__(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> None:
        self.comment_service = comment_service
        self.authorization_service = authorization_service

    @requires_ownership(RoleName.ADMIN)
    async def execute(self, request: DeleteCommentRequest) -> None:
        await self.comment_service.delete_comment(request.comment.id)
