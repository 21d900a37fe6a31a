"""Get post use case."""

from pydantic import BaseModel

from social.application.usecase.comment.common import CommentResponse
from social.domain.service import CommentService, PostService
from social.domain.value import PostId

from .common import PostResponse


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostResponse(PostResponse):
    """Post together with its comments."""

    comments: list[CommentResponse]


class GetPostUseCase:
    """Use case for reading a post and its comments."""

    def __init__(self, post_service: PostService, comment_service: CommentService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Load the post and its comments, newest first.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post_by_id(PostId(request.post_id))
        comments = await self.comment_service.get_comments_for_post(post.id)

        return GetPostResponse(
            **PostResponse.from_post(post).model_dump(),
            comments=[CommentResponse.from_comment(c) for c in comments],
        )
