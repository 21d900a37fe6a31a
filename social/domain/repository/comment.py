"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from social.domain.model import Comment
from social.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for comments."""

    @abstractmethod
    async def create(self, post_id: PostId, author_id: UserId, content: str) -> Comment:
        """Insert a comment.

        Args:
            post_id: Post being commented on
            author_id: Author's user ID
            content: Comment body

        Returns:
            The stored comment, including the author's username
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Comments on a post, newest first."""
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content.

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if a comment was deleted
        """
        pass
