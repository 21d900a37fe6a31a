"""Create post use case."""

from pydantic import BaseModel

from social.domain.model import User
from social.domain.service import PostService

from .common import PostResponse


class CreatePostRequest(BaseModel):
    """Create post request."""

    author: User
    title: str
    content: str
    tags: list[str] = []


class CreatePostUseCase:
    """Use case for publishing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Create the post on behalf of the authenticated author."""
        post = await self.post_service.create_post(
            author_id=request.author.id,
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
        return PostResponse.from_post(post)
