"""Delete post use case."""

from pydantic import BaseModel

from social.application.usecase.base import requires_ownership
from social.domain.model import Post, User
from social.domain.service import AuthorizationService, PostService
from social.domain.value import RoleName, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    actor: User
    post: Post

    @property
    def owner_id(self) -> UserId:
        return self.post.author_id


class DeletePostUseCase:
    """Use case for deleting a post, allowed to its author and admins."""

    def __init__(
        self, post_service: PostService, authorization_service: AuthorizationService
    ) -> None:
        self.post_service = post_service
        self.authorization_service = authorization_service

    @requires_ownership(RoleName.ADMIN)
    async def execute(self, request: DeletePostRequest) -> None:
        """Delete the post and its comments.

        Raises:
            AuthorizationError: If the actor is neither author nor admin
            NotFoundError: If the post no longer exists
        """
        await self.post_service.delete_post(request.post.id)
