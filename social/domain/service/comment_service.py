"""Comment domain service."""

import logfire

from social.domain.error import NotFoundError
from social.domain.model import Comment
from social.domain.repository import CommentRepository
from social.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, post_id: PostId, author_id: UserId, content: str
    ) -> Comment:
        """Add a comment to a post."""
        with logfire.span(
            "comment_service.create_comment", post_id=post_id, author_id=author_id
        ):
            comment = await self.comment_repository.create(post_id, author_id, content)
            logfire.info("Comment created", comment_id=comment.id, post_id=post_id)
            return comment

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Comments on a post, newest first."""
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            return await self.comment_repository.find_by_post(post_id)

    async def update_comment(self, comment_id: CommentId, content: str) -> Comment:
        """Replace a comment's content (last writer wins).

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.update_comment", comment_id=comment_id):
            comment = await self.comment_repository.update_content(comment_id, content)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment updated", comment_id=comment_id)
            return comment

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            if not await self.comment_repository.delete(comment_id):
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=comment_id)
