"""Create comment use case."""

from pydantic import BaseModel

from social.domain.model import User
from social.domain.service import CommentService, PostService
from social.domain.value import PostId

from .common import CommentResponse


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    author: User
    post_id: int
    content: str


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        """Initialize create comment use case.

        Args:
            post_service: Post domain service, used to check the post exists
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Add the comment.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post_by_id(PostId(request.post_id))
        comment = await self.comment_service.create_comment(
            post_id=post.id, author_id=request.author.id, content=request.content
        )
        return CommentResponse.from_comment(comment)
