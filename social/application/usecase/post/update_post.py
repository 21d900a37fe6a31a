"""Update post use case."""

from pydantic import BaseModel

from social.application.usecase.base import requires_ownership
from social.domain.model import Post, User
from social.domain.service import AuthorizationService, PostService
from social.domain.value import RoleName, UserId

from .common import PostResponse


class UpdatePostRequest(BaseModel):
    """Update post request.

    ``version`` is the version the caller last saw; when omitted the
    version of ``post`` is used.
    """

    actor: User
    post: Post
    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None
    version: int | None = None

    @property
    def owner_id(self) -> UserId:
        return self.post.author_id


class UpdatePostUseCase:
    """Use case for editing a post, allowed to its author and moderators."""

    def __init__(
        self, post_service: PostService, authorization_service: AuthorizationService
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            authorization_service: Ownership and role checks
        """
        self.post_service = post_service
        self.authorization_service = authorization_service

    @requires_ownership(RoleName.MODERATOR)
    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Apply the changes guarded by the post's version.

        Raises:
            AuthorizationError: If the actor is neither author nor moderator
            VersionConflictError: If the post changed since it was read
        """
        updated = await self.post_service.update_post(
            request.post,
            title=request.title,
            content=request.content,
            tags=request.tags,
            version=request.version,
        )
        return PostResponse.from_post(updated)
