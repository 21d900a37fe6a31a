"""Get comments use case."""

from pydantic import BaseModel

from social.domain.service import CommentService, PostService
from social.domain.value import PostId

from .common import CommentResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: int


class GetCommentsUseCase:
    """Use case for listing the comments on a post."""

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> list[CommentResponse]:
        """List comments, newest first.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post_by_id(PostId(request.post_id))
        comments = await self.comment_service.get_comments_for_post(post.id)
        return [CommentResponse.from_comment(c) for c in comments]
