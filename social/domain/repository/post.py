"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from social.domain.model import FeedItem, Post
from social.domain.value import FeedQuery, PostId, UserId


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def create(
        self, author_id: UserId, title: str, content: str, tags: list[str]
    ) -> Post:
        """Insert a new post at version 1.

        Args:
            author_id: Author's user ID
            title: Post title
            content: Post body
            tags: Tag names

        Returns:
            The stored post with its assigned ID and timestamps
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """Store new field values if the stored version still matches.

        The write is conditioned on both ``post.id`` and ``post.version``;
        on success the stored version is incremented by one.

        Args:
            post: Post carrying new values and the caller-held version

        Returns:
            The post with its new version and update timestamp

        Raises:
            VersionConflictError: If no row matched the ID and version
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its comments.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def get_user_feed(self, user_id: UserId, query: FeedQuery) -> List[FeedItem]:
        """Posts by the user and by everyone the user follows.

        Args:
            user_id: The viewer
            query: Filters, ordering and pagination window

        Returns:
            Feed items ordered by creation time in ``query.sort`` direction
        """
        pass
